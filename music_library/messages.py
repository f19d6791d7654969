from __future__ import annotations

WELCOME = "Welcome to your music collection!"
WELCOME_HINT = "Type HELP for helpful instructions, or start adding music if you know what to do."

HELP_LINES = (
    'You can add albums (type: add "$ALBUM_TITLE" "$ARTIST")',
    'You can play some music (type: play "$ALBUM_TITLE")',
    "You can find which tunes you haven't heard yet "
    '(type: show unplayed OR show unplayed by "$ARTIST"])',
    "And you can look at your whole collection, too "
    '(type: show all OR show all by "$ARTIST"])',
)

ALREADY_ADDED = "Already Added"
ADDED = 'Added "{title}" by {artist}'
NOTHING_TO_PLAY = "I'm sorry, you don't have any albums to play. Add some!"
NOW_PLAYING = 'You\'re listening to "{title}"'
NOT_FOUND = 'Could not find "{title}". Try adding it now!'
NOTHING_TO_SHOW = "I'm sorry, you don't have any albums to show. Add some!"

NOT_UNDERSTOOD = "I'm sorry, I didn't understand your request. Type HELP for available options!"

CONFIRM_QUIT = "Are you sure you want to leave? Type y/n"
GOODBYE = "Okay! Bye!"
STAYING = "Glad you're sticking around. Add some more music or play something!"
