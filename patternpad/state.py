"""State pattern: an MP3 player whose buttons depend on what it is doing."""

from __future__ import annotations

from abc import ABC, abstractmethod
from collections.abc import Iterable


class Mp3State(ABC):
    """One state of an Mp3Player, deciding what each button does."""

    name: str = ""

    def __init__(self, player: Mp3Player) -> None:
        self.player = player

    @abstractmethod
    def play(self) -> None:
        """Handle the play button."""

    @abstractmethod
    def pause(self) -> None:
        """Handle the pause button."""

    @abstractmethod
    def forward(self) -> None:
        """Handle the forward button."""


class StoppedState(Mp3State):
    name = "Stopped"

    def play(self) -> None:
        print("Started playing")
        self.player.change_state(self.player.playing_state)

    def pause(self) -> None:
        print("Pause does nothing while stopped.")

    def forward(self) -> None:
        print("Goes to next song but will be paused.")
        self.player.change_state(self.player.paused_state)
        self.player.next_song()


class PlayingState(Mp3State):
    name = "Playing"

    def play(self) -> None:
        print("Pressed play whilst playing. Pausing!")
        self.player.change_state(self.player.paused_state)

    def pause(self) -> None:
        print("Was playing, now pausing")
        self.player.change_state(self.player.paused_state)

    def forward(self) -> None:
        print("Going to the next song and continuing playing.")
        self.player.next_song()


class PausedState(Mp3State):
    name = "Paused"

    def play(self) -> None:
        print("Continuing from current song")
        self.player.change_state(self.player.playing_state)

    def pause(self) -> None:
        print("Pausing a paused song does nothing.")

    def forward(self) -> None:
        print("Going to the next song. Remaining paused.")
        self.player.next_song()


class Mp3Player:
    """A player over a fixed playlist; starts stopped on the first song."""

    def __init__(self, songs: Iterable[str]) -> None:
        self.songs = list(songs)
        if not self.songs:
            raise ValueError("an Mp3Player needs at least one song")
        self.song_index = 0
        self.stopped_state: Mp3State = StoppedState(self)
        self.playing_state: Mp3State = PlayingState(self)
        self.paused_state: Mp3State = PausedState(self)
        self.state: Mp3State = self.stopped_state

    @property
    def current_song(self) -> str:
        return self.songs[self.song_index]

    def play(self) -> None:
        self.state.play()

    def pause(self) -> None:
        self.state.pause()

    def forward(self) -> None:
        self.state.forward()

    def change_state(self, state: Mp3State) -> None:
        self.state = state

    def next_song(self) -> None:
        """Move to the next song, wrapping round to the first."""
        self.song_index = (self.song_index + 1) % len(self.songs)

    def __str__(self) -> str:
        return f"Current Song: {self.current_song}\nState: {self.state.name}"