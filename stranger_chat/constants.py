# Routing modes a connection can be in.
MODE_MENU = "menu"
MODE_PUBLIC = "public"
MODE_RANDOM = "random"

MODES = {MODE_MENU, MODE_PUBLIC, MODE_RANDOM}

# Rooms a client may explicitly join. ``menu`` is only ever the initial mode.
JOINABLE_ROOMS = {MODE_PUBLIC, MODE_RANDOM}

# Word lists for generated display names (``<Adjective><Noun><100-999>``).
ADJECTIVES = ["Cool", "Super", "Lazy", "Hyper", "Happy", "Sad", "Wild", "Neon", "Dark", "Fast"]
NOUNS = ["Panda", "Tiger", "Fox", "Wolf", "Cat", "Dog", "Bear", "Eagle", "Shark", "Hawk"]
NICKNAME_NUMBER_RANGE = (100, 999)

# Human-readable texts carried in the ``msg`` field of status payloads.
ROOM_JOINED_TEXT: dict[str, str] = {
    MODE_PUBLIC: "Joined Public Chat",
    MODE_RANDOM: "Joined Random Chat",
}
WAITING_TEXT = "Looking for a stranger..."
CONNECTED_TEXT = "Stranger found! Say hello."
DISCONNECTED_TEXT = "Stranger disconnected."

__all__ = [
    "MODE_MENU",
    "MODE_PUBLIC",
    "MODE_RANDOM",
    "MODES",
    "JOINABLE_ROOMS",
    "ADJECTIVES",
    "NOUNS",
    "NICKNAME_NUMBER_RANGE",
    "ROOM_JOINED_TEXT",
    "WAITING_TEXT",
    "CONNECTED_TEXT",
    "DISCONNECTED_TEXT",
]
