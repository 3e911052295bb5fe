from __future__ import annotations

from typing import Any, Dict

from rest_framework import serializers


def _validate_letter(value: str | None, field_name: str) -> str | None:
    """Blank counts as absent; anything else must be a single letter."""
    if value is None or not value.strip():
        return None
    value = value.strip()
    if len(value) != 1 or not (value.isascii() and value.isalpha()):
        raise serializers.ValidationError(f"Invalid {field_name}")
    return value.lower()


# PUBLIC_INTERFACE
class WordRequestSerializer(serializers.Serializer):
    """Request payload carrying one word (scramble, exists)."""

    word = serializers.CharField(max_length=64)


# PUBLIC_INTERFACE
class PrefixRequestSerializer(serializers.Serializer):
    """Request payload for a prefix lookup.

    The prefix is only trimmed here; letter checks happen in the dictionary,
    which answers an empty list for anything that is not purely letters.
    """

    prefix = serializers.CharField(max_length=64)


# PUBLIC_INTERFACE
class SearchRequestSerializer(serializers.Serializer):
    """Request payload for a pattern search.

    Fields:
    - startChar (optional): first letter of matching words
    - endChar (optional): last letter of matching words
    - length (optional, >= 1): exact word length

    At least one of the three is required.
    """

    startChar = serializers.CharField(source="start_char", required=False, allow_null=True, allow_blank=True, max_length=8)
    endChar = serializers.CharField(source="end_char", required=False, allow_null=True, allow_blank=True, max_length=8)
    length = serializers.IntegerField(required=False, allow_null=True, min_value=1)

    def validate_startChar(self, value):
        return _validate_letter(value, "startChar")

    def validate_endChar(self, value):
        return _validate_letter(value, "endChar")

    def validate(self, attrs: Dict[str, Any]) -> Dict[str, Any]:
        if attrs.get("start_char") is None and attrs.get("end_char") is None and attrs.get("length") is None:
            raise serializers.ValidationError(
                {
                    "startChar": "Invalid startChar",
                    "endChar": "Invalid endChar",
                    "length": "Invalid length",
                }
            )
        return attrs


# PUBLIC_INTERFACE
class SubWordsRequestSerializer(WordRequestSerializer):
    """Request payload for sub-word enumeration; minLength defaults to 3."""

    minLength = serializers.IntegerField(source="min_length", required=False, allow_null=True, min_value=1)


# PUBLIC_INTERFACE
class NewGameRequestSerializer(serializers.Serializer):
    """Query parameters for starting a game; omitted values use settings defaults."""

    length = serializers.IntegerField(required=False, min_value=3, max_value=32)
    minLength = serializers.IntegerField(source="min_length", required=False, min_value=1, max_value=32)

    def validate(self, attrs: Dict[str, Any]) -> Dict[str, Any]:
        length = attrs.get("length")
        min_length = attrs.get("min_length")
        if length is not None and min_length is not None and min_length > length:
            raise serializers.ValidationError({"minLength": "minLength must not exceed length."})
        return attrs


# PUBLIC_INTERFACE
class GuessRequestSerializer(serializers.Serializer):
    """Request payload to submit a guess.

    Neither field is required here: a blank id is answered with
    "Invalid Game ID." and a blank word counts as an incorrect guess, both
    decided by the view rather than rejected as malformed input. The word is
    kept verbatim so the response can echo it back.
    """

    id = serializers.CharField(required=False, allow_null=True, allow_blank=True)
    word = serializers.CharField(required=False, allow_null=True, allow_blank=True, trim_whitespace=False)


# PUBLIC_INTERFACE
class GameIdRequestSerializer(serializers.Serializer):
    """Request payload naming a game (rescramble, goodbye)."""

    id = serializers.CharField(required=False, allow_null=True, allow_blank=True)


# PUBLIC_INTERFACE
class GameResponseSerializer(serializers.Serializer):
    """Game payload returned by create, guess, rescramble and detail endpoints."""

    result = serializers.CharField()
    id = serializers.CharField()
    originalWord = serializers.CharField(source="original_word")
    scrambleWord = serializers.CharField(source="scramble_word")
    guessWord = serializers.CharField(source="guess_word", required=False)
    totalWords = serializers.IntegerField(source="total_words")
    remainingWords = serializers.IntegerField(source="remaining_words")
    guessedWords = serializers.ListField(source="guessed_words", child=serializers.CharField())


# PUBLIC_INTERFACE
class ResultResponseSerializer(serializers.Serializer):
    """Bare result message, used when no game can be shown."""

    result = serializers.CharField()


# PUBLIC_INTERFACE
class ScrambleResponseSerializer(serializers.Serializer):
    word = serializers.CharField()
    scramble = serializers.CharField()


# PUBLIC_INTERFACE
class ExistsResponseSerializer(serializers.Serializer):
    word = serializers.CharField()
    exists = serializers.BooleanField()


# PUBLIC_INTERFACE
class WordListResponseSerializer(serializers.Serializer):
    """List of words answering a dictionary query."""

    words = serializers.ListField(child=serializers.CharField())
