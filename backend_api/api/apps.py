from django.apps import AppConfig
from django.conf import settings


class ApiConfig(AppConfig):
    """App config owning the jumble engine and the game registry.

    Both are built once in ready(): the corpus is loaded a single time per
    process and shared read-only, and games live in the registry until they
    are discarded or the process exits.
    """

    name = "api"

    engine = None
    registry = None

    def ready(self):
        from .jumble import GameSessionRegistry, JumbleEngine

        self.engine = JumbleEngine.from_file(
            settings.JUMBLE_WORDS_FILE,
            seed=settings.JUMBLE_RANDOM_SEED,
            max_retries=settings.JUMBLE_SCRAMBLE_RETRIES,
        )
        self.registry = GameSessionRegistry(self.engine.dictionary, self.engine.matcher, self.engine.scrambler)
