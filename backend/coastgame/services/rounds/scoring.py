from typing import Optional


def game_over_message(score: int, offending_city: Optional[str]) -> str:
    """Pick the game-over blurb for a final streak.

    A round that ended without an offending city was cleared completely.
    """
    if offending_city is None:
        return "You got them all!"
    if score == 0:
        return "Better luck next time!"
    if score < 5:
        return "Not bad!"
    if score < 10:
        return "Nice streak!"
    return "Impressive!"
