import threading
from unittest import mock

from django.apps import apps
from django.urls import reverse
from rest_framework.test import APISimpleTestCase

from api.jumble import GameState


class GameFlowTests(APISimpleTestCase):
    def setUp(self):
        config = apps.get_app_config("api")
        self.engine = config.engine
        self.registry = config.registry

    def _new_game(self, **params):
        resp = self.client.get(reverse('new-game'), params)
        self.assertEqual(resp.status_code, 200)
        return resp.json()

    def _guess(self, game_id, word):
        return self.client.post(reverse('guess'), {"id": game_id, "word": word}, format="json")

    def test_create_new_game(self):
        data = self._new_game()
        self.assertEqual(data["result"], "Created new game.")
        self.assertIsNotNone(data["id"])
        self.assertEqual(len(data["originalWord"]), 6)
        self.assertEqual(sorted(data["scrambleWord"]), sorted(data["originalWord"]))
        self.assertGreater(data["totalWords"], 0)
        self.assertEqual(data["remainingWords"], data["totalWords"])
        self.assertEqual(data["guessedWords"], [])
        self.assertNotIn("guessWord", data)
        self.assertEqual(data["totalWords"], len(self.engine.sub_words(data["originalWord"], 3)))

    def test_create_game_with_parameters(self):
        data = self._new_game(length=5, minLength=4)
        self.assertEqual(len(data["originalWord"]), 5)
        self.assertEqual(data["totalWords"], len(self.engine.sub_words(data["originalWord"], 4)))

    def test_create_game_rejects_bad_parameters(self):
        for params in ({"length": 2}, {"minLength": 0}, {"length": 4, "minLength": 5}):
            resp = self.client.get(reverse('new-game'), params)
            self.assertEqual(resp.status_code, 400, params)

    def test_create_game_without_eligible_word(self):
        resp = self.client.get(reverse('new-game'), {"length": 30})
        self.assertEqual(resp.status_code, 400)
        self.assertIn("length 30", resp.json()["result"])

    def test_missing_id_is_invalid(self):
        before = self._new_game()
        resp = self._guess("  ", "  ")
        self.assertEqual(resp.status_code, 404)
        self.assertEqual(resp.json()["result"], "Invalid Game ID.")

        resp = self.client.post(reverse('guess'), {}, format="json")
        self.assertEqual(resp.status_code, 404)
        self.assertEqual(resp.json()["result"], "Invalid Game ID.")
        self.assertEqual(self.registry.get(before["id"]).remaining_words, before["totalWords"])

    def test_malformed_id_is_invalid(self):
        resp = self._guess("not-a-game", "low")
        self.assertEqual(resp.status_code, 404)
        self.assertEqual(resp.json()["result"], "Invalid Game ID.")

    def test_unknown_id_is_not_found(self):
        resp = self._guess("51eb70da-7e19-46eb-b45e-ab25e9b6c444", "  ")
        self.assertEqual(resp.status_code, 404)
        self.assertEqual(resp.json()["result"], "Game board/state not found.")

    def test_blank_word_is_incorrect(self):
        game = self._new_game()
        resp = self._guess(game["id"], "")
        self.assertEqual(resp.status_code, 200)
        data = resp.json()
        self.assertEqual(data["result"], "Guessed incorrectly.")
        self.assertEqual(data["id"], game["id"])
        self.assertEqual(data["originalWord"], game["originalWord"])
        self.assertEqual(data["guessWord"], "")
        self.assertEqual(data["totalWords"], game["totalWords"])
        self.assertEqual(data["remainingWords"], game["remainingWords"])
        self.assertEqual(data["guessedWords"], [])

    def test_wrong_word_is_incorrect(self):
        game = self._new_game()
        data = self._guess(game["id"], "helloworld").json()
        self.assertEqual(data["result"], "Guessed incorrectly.")
        self.assertEqual(data["guessWord"], "helloworld")
        self.assertEqual(data["remainingWords"], game["remainingWords"])
        self.assertEqual(data["guessedWords"], [])

    def test_first_correct_word(self):
        game = self._new_game()
        correct = self.engine.sub_words(game["originalWord"])[0]
        data = self._guess(game["id"], correct.upper()).json()
        self.assertEqual(data["guessWord"], correct.upper())
        self.assertEqual(data["remainingWords"], game["remainingWords"] - 1)
        self.assertEqual(data["guessedWords"], [correct])
        if game["totalWords"] > 1:
            self.assertEqual(data["result"], "Guessed correctly.")

            repeat = self._guess(game["id"], correct).json()
            self.assertEqual(repeat["result"], "Guessed incorrectly.")
            self.assertEqual(repeat["guessedWords"], [correct])
            self.assertEqual(repeat["remainingWords"], game["remainingWords"] - 1)

    def test_all_correct_words(self):
        game = self._new_game()
        correct_words = self.engine.sub_words(game["originalWord"])
        results = []
        data = None
        for word in correct_words:
            resp = self._guess(game["id"], word)
            self.assertEqual(resp.status_code, 200)
            data = resp.json()
            self.assertEqual(data["guessWord"], word)
            results.append(data["result"])

        self.assertEqual(results.count("All words guessed."), 1)
        self.assertEqual(data["result"], "All words guessed.")
        self.assertEqual(data["id"], game["id"])
        self.assertEqual(data["totalWords"], game["totalWords"])
        self.assertEqual(data["remainingWords"], 0)
        self.assertEqual(data["guessedWords"], correct_words)

        after = self._guess(game["id"], correct_words[0]).json()
        self.assertEqual(after["result"], "All words guessed.")
        self.assertEqual(after["remainingWords"], 0)
        self.assertEqual(len(after["guessedWords"]), len(correct_words))

    def test_rescramble(self):
        game = self._new_game()
        resp = self.client.post(reverse('rescramble'), {"id": game["id"]}, format="json")
        self.assertEqual(resp.status_code, 200)
        data = resp.json()
        self.assertEqual(data["result"], "Scrambled again.")
        self.assertEqual(sorted(data["scrambleWord"]), sorted(game["originalWord"]))
        self.assertNotEqual(data["scrambleWord"], game["scrambleWord"])
        self.assertEqual(data["remainingWords"], game["remainingWords"])

        resp = self.client.post(reverse('rescramble'), {"id": ""}, format="json")
        self.assertEqual(resp.status_code, 404)
        self.assertEqual(resp.json()["result"], "Invalid Game ID.")

    def test_game_detail(self):
        game = self._new_game()
        resp = self.client.get(reverse('game-detail', kwargs={"game_id": game["id"]}))
        self.assertEqual(resp.status_code, 200)
        data = resp.json()
        self.assertEqual(data["result"], "Game in progress.")
        self.assertEqual(data["id"], game["id"])
        self.assertEqual(data["scrambleWord"], game["scrambleWord"])

        resp = self.client.get(reverse('game-detail', kwargs={"game_id": "51eb70da-7e19-46eb-b45e-ab25e9b6c444"}))
        self.assertEqual(resp.status_code, 404)
        self.assertEqual(resp.json()["result"], "Game board/state not found.")

    def test_goodbye(self):
        game = self._new_game()
        resp = self.client.post(reverse('goodbye'), {"id": game["id"]}, format="json")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["result"], "Game ended.")
        self.assertNotIn(game["id"], self.registry)

        again = self._guess(game["id"], "low")
        self.assertEqual(again.status_code, 404)
        self.assertEqual(again.json()["result"], "Game board/state not found.")

    def test_guess_without_word_echoes_null(self):
        game = self._new_game()
        resp = self.client.post(reverse('guess'), {"id": game["id"]}, format="json")
        self.assertEqual(resp.status_code, 200)
        data = resp.json()
        self.assertEqual(data["result"], "Guessed incorrectly.")
        self.assertIn("guessWord", data)
        self.assertIsNone(data["guessWord"])

    def test_result_describes_own_guess_when_another_finishes_the_game(self):
        for _ in range(20):
            game = self._new_game()
            words = self.engine.sub_words(game["originalWord"])
            if len(words) >= 2:
                break
        else:
            self.skipTest("no game with two or more sub-words")

        first, rest = words[0], words[1:]
        apply_guess = GameState.apply_guess

        def guess_then_other_player_finishes(state, candidate):
            outcome = apply_guess(state, candidate)
            if candidate == first:
                other = threading.Thread(target=lambda: [apply_guess(state, w) for w in rest])
                other.start()
                other.join()
            return outcome

        with mock.patch.object(GameState, "apply_guess", guess_then_other_player_finishes):
            data = self._guess(game["id"], first).json()

        self.assertEqual(data["result"], "Guessed correctly.")
        self.assertEqual(data["guessWord"], first)
        self.assertEqual(data["remainingWords"], game["totalWords"] - 1)
        self.assertEqual(data["guessedWords"], [first])
        self.assertEqual(self.registry.get(game["id"]).remaining_words, 0)
