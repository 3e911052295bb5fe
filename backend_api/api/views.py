from __future__ import annotations

import logging
from typing import Any, Dict, Optional

from django.apps import apps
from django.conf import settings
from drf_yasg import openapi
from drf_yasg.utils import swagger_auto_schema
from rest_framework import permissions, status
from rest_framework.decorators import api_view, permission_classes
from rest_framework.response import Response

from .jumble import (
    GameNotFoundError,
    GameSessionRegistry,
    GameValidationError,
    InvalidGameIdError,
    JumbleEngine,
    NoWordAvailableError,
)
from .jumble.state import GameSnapshot
from .serializers import (
    ExistsResponseSerializer,
    GameIdRequestSerializer,
    GameResponseSerializer,
    GuessRequestSerializer,
    NewGameRequestSerializer,
    PrefixRequestSerializer,
    ResultResponseSerializer,
    ScrambleResponseSerializer,
    SearchRequestSerializer,
    SubWordsRequestSerializer,
    WordListResponseSerializer,
    WordRequestSerializer,
)

logger = logging.getLogger(__name__)

RESULT_CREATED = "Created new game."
RESULT_CORRECT = "Guessed correctly."
RESULT_INCORRECT = "Guessed incorrectly."
RESULT_ALL_GUESSED = "All words guessed."
RESULT_INVALID_ID = "Invalid Game ID."
RESULT_NOT_FOUND = "Game board/state not found."
RESULT_IN_PROGRESS = "Game in progress."
RESULT_RESCRAMBLED = "Scrambled again."
RESULT_GOODBYE = "Game ended."


def _engine() -> JumbleEngine:
    return apps.get_app_config("api").engine


def _registry() -> GameSessionRegistry:
    return apps.get_app_config("api").registry


def _game_payload(result: str, snapshot: GameSnapshot, guess_word: Optional[str] = None, with_guess: bool = False) -> Dict[str, Any]:
    """Project a game snapshot into the public response shape."""
    payload = {
        "result": result,
        "id": snapshot.id,
        "original_word": snapshot.original,
        "scramble_word": snapshot.scramble,
        "total_words": snapshot.total_words,
        "remaining_words": snapshot.remaining_words,
        "guessed_words": list(snapshot.guessed_words),
    }
    if with_guess:
        payload["guess_word"] = guess_word
    return GameResponseSerializer(payload).data


def _lookup_failure(exc: Exception) -> Response:
    """Map registry lookup errors to the 404 responses of the game API."""
    if isinstance(exc, InvalidGameIdError):
        message = RESULT_INVALID_ID
    else:
        message = RESULT_NOT_FOUND
    logger.warning("Game lookup failed: %s", exc)
    return Response(ResultResponseSerializer({"result": message}).data, status=status.HTTP_404_NOT_FOUND)


# PUBLIC_INTERFACE
@api_view(["GET"])
@permission_classes([permissions.AllowAny])
def health(request):
    """Health check endpoint for the API.

    Returns:
    - 200 OK with {"message": "Server is up!", "words": <corpus size>}
    """
    return Response({"message": "Server is up!", "words": len(_engine().dictionary)})


# PUBLIC_INTERFACE
@swagger_auto_schema(
    method="post",
    operation_id="scramble",
    operation_summary="Scramble the letters of a word",
    request_body=WordRequestSerializer,
    responses={200: ScrambleResponseSerializer},
    tags=["jumble"],
)
@api_view(["POST"])
@permission_classes([permissions.AllowAny])
def scramble(request):
    """Return a random permutation of the submitted word's letters."""
    serializer = WordRequestSerializer(data=request.data or {})
    serializer.is_valid(raise_exception=True)
    word = serializer.validated_data["word"]
    resp = {"word": word, "scramble": _engine().scramble(word)}
    return Response(ScrambleResponseSerializer(resp).data, status=status.HTTP_200_OK)


# PUBLIC_INTERFACE
@swagger_auto_schema(
    method="get",
    operation_id="palindrome",
    operation_summary="List palindrome words",
    responses={200: WordListResponseSerializer},
    tags=["jumble"],
)
@api_view(["GET"])
@permission_classes([permissions.AllowAny])
def palindrome(request):
    """List corpus words of two or more letters that read the same backwards."""
    return Response(WordListResponseSerializer({"words": _engine().palindromes()}).data)


# PUBLIC_INTERFACE
@swagger_auto_schema(
    method="post",
    operation_id="exists",
    operation_summary="Check whether a word is in the dictionary",
    request_body=WordRequestSerializer,
    responses={200: ExistsResponseSerializer},
    tags=["jumble"],
)
@api_view(["POST"])
@permission_classes([permissions.AllowAny])
def exists(request):
    """Case-insensitive dictionary membership check."""
    serializer = WordRequestSerializer(data=request.data or {})
    serializer.is_valid(raise_exception=True)
    word = serializer.validated_data["word"]
    resp = {"word": word, "exists": _engine().exists(word)}
    return Response(ExistsResponseSerializer(resp).data)


# PUBLIC_INTERFACE
@swagger_auto_schema(
    method="post",
    operation_id="prefix",
    operation_summary="List words starting with a prefix",
    request_body=PrefixRequestSerializer,
    responses={200: WordListResponseSerializer},
    tags=["jumble"],
)
@api_view(["POST"])
@permission_classes([permissions.AllowAny])
def prefix(request):
    """Words beginning with the prefix; non-letter prefixes match nothing."""
    serializer = PrefixRequestSerializer(data=request.data or {})
    serializer.is_valid(raise_exception=True)
    words = _engine().words_with_prefix(serializer.validated_data["prefix"])
    return Response(WordListResponseSerializer({"words": words}).data)


# PUBLIC_INTERFACE
@swagger_auto_schema(
    method="post",
    operation_id="search",
    operation_summary="Search words by first letter, last letter and length",
    operation_description="""
Request body (at least one field required):
- startChar (string, optional): single letter the word starts with
- endChar (string, optional): single letter the word ends with
- length (int, optional, >= 1): exact word length
""",
    request_body=SearchRequestSerializer,
    responses={200: WordListResponseSerializer},
    tags=["jumble"],
)
@api_view(["POST"])
@permission_classes([permissions.AllowAny])
def search(request):
    """Words matching every supplied filter."""
    serializer = SearchRequestSerializer(data=request.data or {})
    serializer.is_valid(raise_exception=True)
    vd = serializer.validated_data
    words = _engine().search(
        start_char=vd.get("start_char"),
        end_char=vd.get("end_char"),
        length=vd.get("length"),
    )
    return Response(WordListResponseSerializer({"words": words}).data)


# PUBLIC_INTERFACE
@swagger_auto_schema(
    method="post",
    operation_id="sub_words",
    operation_summary="List words spelled from a word's letters",
    request_body=SubWordsRequestSerializer,
    responses={200: WordListResponseSerializer},
    tags=["jumble"],
)
@api_view(["POST"])
@permission_classes([permissions.AllowAny])
def sub_words(request):
    """Sub-words of the submitted word with at least minLength letters (default 3)."""
    serializer = SubWordsRequestSerializer(data=request.data or {})
    serializer.is_valid(raise_exception=True)
    vd = serializer.validated_data
    words = _engine().sub_words(vd["word"], vd.get("min_length"))
    return Response(WordListResponseSerializer({"words": words}).data)


# PUBLIC_INTERFACE
@swagger_auto_schema(
    method="get",
    operation_id="new_game",
    operation_summary="Start a new game",
    operation_description="""
Pick a random word, precompute every sub-word hidden in it and register a
new game. Response `result` is "Created new game.".

Query params:
- length (int, optional, >= 3): seed word length, default from settings (6)
- minLength (int, optional, >= 1, <= length): shortest sub-word, default 3
""",
    manual_parameters=[
        openapi.Parameter("length", openapi.IN_QUERY, type=openapi.TYPE_INTEGER, required=False),
        openapi.Parameter("minLength", openapi.IN_QUERY, type=openapi.TYPE_INTEGER, required=False),
    ],
    responses={200: GameResponseSerializer, 400: ResultResponseSerializer},
    tags=["game"],
)
@api_view(["GET"])
@permission_classes([permissions.AllowAny])
def new_game(request):
    """Create a new game and return its initial state."""
    serializer = NewGameRequestSerializer(data=request.query_params)
    serializer.is_valid(raise_exception=True)
    vd = serializer.validated_data
    length = vd.get("length", settings.JUMBLE_DEFAULT_LENGTH)
    min_length = vd.get("min_length", settings.JUMBLE_DEFAULT_MIN_LENGTH)

    try:
        state = _registry().create_game(length, min_length)
    except (GameValidationError, NoWordAvailableError) as e:
        return Response({"result": str(e)}, status=status.HTTP_400_BAD_REQUEST)

    return Response(_game_payload(RESULT_CREATED, state.snapshot()), status=status.HTTP_200_OK)


# PUBLIC_INTERFACE
@swagger_auto_schema(
    method="post",
    operation_id="guess",
    operation_summary="Submit a guess",
    operation_description="""
Request body:
- id (string): game id returned by /game/new
- word (string): guessed sub-word, matched case-insensitively

`result` is one of "Guessed correctly.", "Guessed incorrectly.",
"All words guessed.", or, with HTTP 404, "Invalid Game ID." /
"Game board/state not found.".
""",
    request_body=GuessRequestSerializer,
    responses={200: GameResponseSerializer, 404: ResultResponseSerializer},
    tags=["game"],
)
@api_view(["POST"])
@permission_classes([permissions.AllowAny])
def guess(request):
    """Apply a guess to a game and report the updated state."""
    serializer = GuessRequestSerializer(data=request.data or {})
    serializer.is_valid(raise_exception=True)
    vd = serializer.validated_data
    word = vd.get("word")

    try:
        _, outcome = _registry().apply_guess(vd.get("id"), word)
    except (InvalidGameIdError, GameNotFoundError) as e:
        return _lookup_failure(e)

    # taken under the same lock hold as the guess
    snapshot = outcome.snapshot
    if outcome.completed:
        result = RESULT_ALL_GUESSED
    elif outcome.correct:
        result = RESULT_CORRECT
    elif snapshot.remaining_words == 0:
        result = RESULT_ALL_GUESSED
    else:
        result = RESULT_INCORRECT
    return Response(_game_payload(result, snapshot, guess_word=word, with_guess=True), status=status.HTTP_200_OK)


# PUBLIC_INTERFACE
@swagger_auto_schema(
    method="post",
    operation_id="rescramble",
    operation_summary="Scramble a game's word again",
    request_body=GameIdRequestSerializer,
    responses={200: GameResponseSerializer, 404: ResultResponseSerializer},
    tags=["game"],
)
@api_view(["POST"])
@permission_classes([permissions.AllowAny])
def rescramble(request):
    """Replace the displayed scramble of a game; guessed words are unaffected."""
    serializer = GameIdRequestSerializer(data=request.data or {})
    serializer.is_valid(raise_exception=True)
    registry = _registry()
    try:
        game_id = serializer.validated_data.get("id")
        registry.rescramble(game_id)
        snapshot = registry.get(game_id).snapshot()
    except (InvalidGameIdError, GameNotFoundError) as e:
        return _lookup_failure(e)
    return Response(_game_payload(RESULT_RESCRAMBLED, snapshot))


# PUBLIC_INTERFACE
@swagger_auto_schema(
    method="get",
    operation_id="game_detail",
    operation_summary="Get the current state of a game",
    responses={200: GameResponseSerializer, 404: ResultResponseSerializer},
    tags=["game"],
)
@api_view(["GET"])
@permission_classes([permissions.AllowAny])
def game_detail(request, game_id: str):
    """Retrieve a game by id without changing it."""
    try:
        snapshot = _registry().get(game_id).snapshot()
    except (InvalidGameIdError, GameNotFoundError) as e:
        return _lookup_failure(e)
    result = RESULT_ALL_GUESSED if snapshot.remaining_words == 0 else RESULT_IN_PROGRESS
    return Response(_game_payload(result, snapshot))


# PUBLIC_INTERFACE
@swagger_auto_schema(
    method="post",
    operation_id="goodbye",
    operation_summary="End a game and forget it",
    request_body=GameIdRequestSerializer,
    responses={200: ResultResponseSerializer, 404: ResultResponseSerializer},
    tags=["game"],
)
@api_view(["POST"])
@permission_classes([permissions.AllowAny])
def goodbye(request):
    """Discard a game from the registry."""
    serializer = GameIdRequestSerializer(data=request.data or {})
    serializer.is_valid(raise_exception=True)
    try:
        removed = _registry().discard(serializer.validated_data.get("id"))
    except InvalidGameIdError as e:
        return _lookup_failure(e)
    if not removed:
        return Response(ResultResponseSerializer({"result": RESULT_NOT_FOUND}).data, status=status.HTTP_404_NOT_FOUND)
    return Response(ResultResponseSerializer({"result": RESULT_GOODBYE}).data)
