"""Domain operations behind the HTTP routes."""
