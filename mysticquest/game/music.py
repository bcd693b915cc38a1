import logging
import threading
import time

logger = logging.getLogger(__name__)


class BackgroundMusic:
    """Pretends to play a soundtrack on its own thread.

    The thread only prints and sleeps. It shares nothing with the game and
    runs for the full duration once started.
    """

    def __init__(self, console, duration: float = 5):
        self.console = console
        self.duration = duration
        self.thread = None

    def _play(self):
        self.console.print("Playing background music...")
        time.sleep(self.duration)
        self.console.print("Music ended.")
        logger.debug("Background music finished after %s seconds", self.duration)

    def start(self):
        self.thread = threading.Thread(target=self._play, name="background-music")
        self.thread.start()
        logger.debug("Background music thread started")
        return self

    def join(self):
        if self.thread is not None and self.thread.is_alive():
            self.thread.join()
