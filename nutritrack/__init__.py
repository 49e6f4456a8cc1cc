"""NutriTrack health tracking backend."""
