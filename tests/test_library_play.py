import unittest

from music_library.library import MusicLibrary
from music_library.prompt_io import BufferPromptIO

MUSIC = {
    "Ride the Lightning": "Metallica",
    "Licensed to Ill": "Beastie Boys",
    "The Dark Side of the Moon": "Pink Floyd",
    "Graceland": "Paul Simon",
}


class TestPlayAlbum(unittest.TestCase):
    def setUp(self) -> None:
        self.prompt_io = BufferPromptIO()
        self.library = MusicLibrary(self.prompt_io)
        for title, artist in MUSIC.items():
            self.library.add_album(title, artist)
        self.prompt_io.outputs.clear()

    def test_plays_music_found_by_title(self) -> None:
        album = self.library.play_album("Ride the Lightning", "Metallica")
        self.assertIs(album, self.library.albums[0])
        self.assertTrue(self.library.albums[0].played)
        self.assertEqual([a.played for a in self.library.albums[1:]], [False, False, False])
        self.assertEqual(self.prompt_io.outputs, ['You\'re listening to "Ride the Lightning"'])

    def test_output_uses_requested_title_verbatim(self) -> None:
        album = self.library.play_album("whatever", "Pink Floyd")
        self.assertEqual(album.title, "The Dark Side of the Moon")
        self.assertTrue(album.played)
        self.assertEqual(self.prompt_io.outputs, ['You\'re listening to "whatever"'])

    def test_first_match_wins(self) -> None:
        self.library.play_album("Graceland", "Metallica")
        self.assertTrue(self.library.albums[0].played)
        self.assertFalse(self.library.albums[3].played)

    def test_missing_album_is_not_played(self) -> None:
        self.assertIsNone(self.library.play_album("Really Good Album", "Justin Bieber"))
        self.assertEqual(
            self.prompt_io.outputs,
            ['Could not find "Really Good Album". Try adding it now!'],
        )
        self.assertEqual(len(self.library.albums), len(MUSIC))
        self.assertFalse(any(album.played for album in self.library.albums))
        self.assertEqual(self.library.find_albums("Really Good Album", None), [])

    def test_empty_collection(self) -> None:
        self.library.albums = []
        self.assertIsNone(self.library.play_album("Graceland", "Paul Simon"))
        self.assertEqual(
            self.prompt_io.outputs,
            ["I'm sorry, you don't have any albums to play. Add some!"],
        )

    def test_missing_title_uses_artist(self) -> None:
        self.library.play_album(None, "Paul Simon")
        self.assertTrue(self.library.albums[3].played)
        self.assertEqual(self.prompt_io.outputs, ['You\'re listening to ""'])


if __name__ == "__main__":
    unittest.main()
