from io import StringIO
from unittest import mock

from django.apps import apps
from django.core.management import call_command
from django.test import SimpleTestCase

from api.jumble import JumbleEngine, WordDictionary


class CorpusStatsCommandTests(SimpleTestCase):
    def test_reports_loaded_corpus(self):
        out = StringIO()
        call_command("corpus_stats", "--length", "2", stdout=out)
        output = out.getvalue()
        size = len(apps.get_app_config("api").engine.dictionary)
        self.assertIn(f"Loaded {size} words.", output)
        self.assertIn(" 6 letters:", output)
        self.assertIn("Palindromes:", output)
        self.assertIn("Words of length 2: -", output)

    def test_warns_when_corpus_empty(self):
        config = apps.get_app_config("api")
        out = StringIO()
        with mock.patch.object(config, "engine", JumbleEngine(WordDictionary([]))):
            call_command("corpus_stats", stdout=out)
        self.assertIn("empty or could not be loaded", out.getvalue())
