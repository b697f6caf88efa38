"""liftlog - deterministic training program builder and training log."""
