from django.urls import path
from .views import (
    health,
    scramble,
    palindrome,
    exists,
    prefix,
    search,
    sub_words,
    new_game,
    guess,
    rescramble,
    game_detail,
    goodbye,
)

urlpatterns = [
    path('health/', health, name='Health'),
    path('scramble', scramble, name='scramble'),
    path('palindrome', palindrome, name='palindrome'),
    path('exists', exists, name='exists'),
    path('prefix', prefix, name='prefix'),
    path('search', search, name='search'),
    path('subWords', sub_words, name='sub-words'),
    path('game/new', new_game, name='new-game'),
    path('game/guess', guess, name='guess'),
    path('game/rescramble', rescramble, name='rescramble'),
    path('game/goodbye', goodbye, name='goodbye'),
    path('game/<str:game_id>', game_detail, name='game-detail'),
]
