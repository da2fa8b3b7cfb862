"""Qt shell around the spectrum pipeline."""
