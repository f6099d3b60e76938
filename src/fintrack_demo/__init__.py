"""System category catalogue and demo data for FinTrack."""
