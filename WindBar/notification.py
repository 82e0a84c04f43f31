"""Alert sound cues."""
import logging
import os
import shutil
import subprocess
import sys
from abc import ABC, abstractmethod
from enum import Enum
from typing import List, Optional, Union


class AlertSound(str, Enum):
    PING = "Ping"
    POP = "Pop"
    HERO = "Hero"
    SUBMARINE = "Submarine"
    NONE = "None"


# Either a named system sound or a path to a custom sound file
SoundCue = Union[AlertSound, str]

SYSTEM_SOUND_DIR = "/System/Library/Sounds"


def parse_cue(value: Optional[str], custom_path: Optional[str] = None) -> SoundCue:
    """
    Resolve a stored setting to a cue.

    "custom" selects ``custom_path``; unknown names fall back to Ping.
    """
    if value == "custom":
        return custom_path if custom_path else AlertSound.NONE
    try:
        return AlertSound(value)
    except ValueError:
        return AlertSound.PING


class NotificationSinkBase(ABC):
    """Abstract base class for alert notification sinks."""

    @abstractmethod
    def notify(self, cue: SoundCue) -> None:
        """Play or otherwise emit ``cue``. AlertSound.NONE must be a no-op."""
        pass


class SoundNotifier(NotificationSinkBase):
    """
    Plays cues through a command-line audio player.

    Uses ``afplay`` on macOS and ``paplay``/``aplay`` elsewhere; when none is
    available, rings the terminal bell instead. Playback is fire-and-forget.
    """

    PLAYERS = ["afplay", "paplay", "aplay"]

    def __init__(self, player: Optional[str] = None, sound_dir: str = SYSTEM_SOUND_DIR):
        self.player = player if player is not None else self._find_player()
        self.sound_dir = sound_dir

    def _find_player(self) -> Optional[str]:
        for name in self.PLAYERS:
            path = shutil.which(name)
            if path:
                return path
        return None

    def sound_path(self, cue: SoundCue) -> Optional[str]:
        if isinstance(cue, AlertSound):
            if cue is AlertSound.NONE:
                return None
            return os.path.join(self.sound_dir, f"{cue.value}.aiff")
        return os.path.expanduser(cue)

    def notify(self, cue: SoundCue) -> None:
        if cue is AlertSound.NONE:
            logging.debug("Alert sound disabled")
            return

        path = self.sound_path(cue)
        logging.info(f"Playing alert sound: {path}")
        if self.player and path and os.path.exists(path):
            try:
                subprocess.Popen(self._command(path), stdout=subprocess.DEVNULL, stderr=subprocess.DEVNULL)
                return
            except OSError as e:
                logging.warning(f"Failed to start sound player {self.player}: {e}")
        else:
            logging.debug(f"No player or sound file for {path}, using terminal bell")
        sys.stdout.write("\a")
        sys.stdout.flush()

    def _command(self, path: str) -> List[str]:
        return [self.player, path]


class RecordingNotifier(NotificationSinkBase):
    """Collects cues instead of playing them. Used for --dry-run style output."""

    def __init__(self):
        self.cues: List[SoundCue] = []

    def notify(self, cue: SoundCue) -> None:
        if cue is AlertSound.NONE:
            return
        logging.info(f"Alert cue: {cue}")
        self.cues.append(cue)
