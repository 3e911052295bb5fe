from django.urls import reverse
from rest_framework.test import APISimpleTestCase


class QueryEndpointTests(APISimpleTestCase):
    def test_health(self):
        resp = self.client.get(reverse('Health'))
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["message"], "Server is up!")
        self.assertGreater(resp.json()["words"], 0)

    def test_scramble(self):
        resp = self.client.post(reverse('scramble'), {"word": "elephant"}, format="json")
        self.assertEqual(resp.status_code, 200)
        data = resp.json()
        self.assertEqual(data["word"], "elephant")
        self.assertEqual(sorted(data["scramble"]), sorted("elephant"))
        self.assertNotEqual(data["scramble"], "elephant")

    def test_scramble_requires_word(self):
        for body in ({}, {"word": "   "}):
            resp = self.client.post(reverse('scramble'), body, format="json")
            self.assertEqual(resp.status_code, 400)
            self.assertIn("word", resp.json())

    def test_palindrome(self):
        resp = self.client.get(reverse('palindrome'))
        self.assertEqual(resp.status_code, 200)
        words = resp.json()["words"]
        self.assertIn("deed", words)
        self.assertIn("level", words)
        self.assertNotIn("a", words)
        for word in words:
            self.assertGreaterEqual(len(word), 2)
            self.assertEqual(word, word[::-1])

    def test_exists(self):
        resp = self.client.post(reverse('exists'), {"word": " Yellow "}, format="json")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json(), {"word": "Yellow", "exists": True})

        resp = self.client.post(reverse('exists'), {"word": "xyzzy"}, format="json")
        self.assertFalse(resp.json()["exists"])

    def test_prefix(self):
        resp = self.client.post(reverse('prefix'), {"prefix": "YEL"}, format="json")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["words"], ["yell", "yellow"])

        resp = self.client.post(reverse('prefix'), {"prefix": "y3"}, format="json")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["words"], [])

    def test_search(self):
        resp = self.client.post(reverse('search'), {"startChar": "y", "endChar": "W"}, format="json")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(resp.json()["words"], ["yellow", "yeow", "yew"])

        resp = self.client.post(reverse('search'), {"startChar": "z", "length": 4}, format="json")
        self.assertEqual(resp.json()["words"], ["zero", "zone"])

    def test_search_needs_a_filter(self):
        resp = self.client.post(reverse('search'), {"startChar": "", "endChar": None}, format="json")
        self.assertEqual(resp.status_code, 400)
        self.assertEqual(set(resp.json()), {"startChar", "endChar", "length"})

    def test_search_rejects_invalid_filters(self):
        for body in ({"length": 0}, {"startChar": "ab"}, {"endChar": "9"}, {"startChar": "\u00e9"}):
            resp = self.client.post(reverse('search'), body, format="json")
            self.assertEqual(resp.status_code, 400, body)

    def test_sub_words(self):
        resp = self.client.post(reverse('sub-words'), {"word": "yellow"}, format="json")
        self.assertEqual(resp.status_code, 200)
        self.assertEqual(
            resp.json()["words"],
            ["low", "lowly", "lye", "ole", "owe", "owl", "well", "welly", "woe", "yell", "yeow", "yew", "yowl"],
        )

        resp = self.client.post(reverse('sub-words'), {"word": "yellow", "minLength": 5}, format="json")
        self.assertEqual(resp.json()["words"], ["lowly", "welly"])

        resp = self.client.post(reverse('sub-words'), {"word": "yellow", "minLength": 0}, format="json")
        self.assertEqual(resp.status_code, 400)
