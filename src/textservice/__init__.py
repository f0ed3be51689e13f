"""Host text-service surfaces (CLI and Flask API) on top of spellrank.Engine."""
