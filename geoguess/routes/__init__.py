from . import guesses, health
