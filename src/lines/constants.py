FIELD_SIZE = 9
# Number of distinct circle colors; colors are the integers [0, CIRCLE_KINDS).
CIRCLE_KINDS = 7
CIRCLES_PER_TURN = 3
# Minimum straight run of one color that gets cleared.
RUN_LENGTH = 5
SCORE_PER_CELL = 1
