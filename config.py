# ==========================================
# GLOBAL CONFIG
# ==========================================

# --- UPSTREAM ---
API_BASE = "https://pokeapi.co/api/v2/pokemon"
MAX_POKEMON_ID = 1025  # Gen 1-9
START_POKEMON_ID = 1

# --- RENDERING ---
STAT_MAX = 255
STAT_SLOTS = ("hp", "atk", "def")  # vitality, attack, defense
PLACEHOLDER_IMAGE = (
    'data:image/svg+xml,%3Csvg xmlns="http://www.w3.org/2000/svg" width="200" height="200"%3E'
    '%3Crect fill="%23f0f0f0" width="200" height="200"/%3E%3C/svg%3E'
)

# --- INPUT ---
NEXT_KEY = "Enter"

# --- STATUS MESSAGES ---
MSG_LOADING = "Loading Pokémon..."
MSG_INVALID_ID = "Invalid Pokémon ID"
MSG_MALFORMED = "Malformed Pokémon data"
ERROR_PREFIX = "Error: "

STATUS_COLORS = {
    "error": "#ff6b6b",
    "info": "#4CAF50",
}
