"""Application services (orchestration without terminal side-effects)."""
