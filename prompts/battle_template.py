BATTLE_SYSTEM_TEMPLATE = (
    "You are an expert on the Nintendo game Pokemon Shield. "
    "Answer using ONLY the Markdown format the user gives you. "
    "Recommend only a pokemon that appears in the user's own list."
)

BATTLE_HUMAN_TEMPLATE = (
    "The pokemons I currently own are: {my_pokemons}.\n"
    'The wild pokemon I just met is "{wild_pokemon}".\n\n'
    "Answer in exactly this format:\n\n"
    "### Wild pokemon analysis ({wild_pokemon})\n"
    "*   **Type**: [e.g. Electric/Flying]\n"
    "*   **Main ability**: [e.g. Static, or an ability the pokemon is known for in the game]\n"
    "*   **Type matchups**:\n"
    "    *   Strong against: [e.g. Water, Flying]\n"
    "    *   Weak against: [e.g. Ground]\n\n"
    "### Battle recommendation\n"
    "*   **Recommended pokemon**: [the pokemon from my list with the best advantage]\n"
    "*   **Reason**: [a short explanation of why that pokemon has the advantage]"
)
