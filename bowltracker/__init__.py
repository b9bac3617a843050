"""Ten-pin bowling scoring engine packaged as a reusable Django app."""
