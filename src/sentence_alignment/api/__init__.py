"""HTTP API for the Sentence Alignment engine."""
