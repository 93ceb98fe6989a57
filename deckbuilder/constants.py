"""Structural rules of thumb shared by the estimator and the framing drawings."""

JOIST_SPACING_IN = 16       # joists on center
POST_SPACING_FT = 6         # beams and posts on center
RISE_PER_STEP_IN = 7.5      # max rise per stair step
TREAD_RUN_IN = 10           # run per stair tread
RAILING_HEIGHT_FT = 3.0
