"""GitFx core: domain, contracts, settings and orchestration."""
