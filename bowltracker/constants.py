"""Rules of ten-pin bowling shared by the frames and the game."""

MAX_PINS = 10
PERFECT_GAME_SCORE = 300

STANDARD_FRAME_THROWS = 2

FIRST_FRAME_NUMBER = 1
LAST_FRAME_NUMBER = 10

FIRST_THROW_INDEX = 0
SECOND_THROW_INDEX = 1
LAST_THROW_INDEX = 2

GUTTER = 0
