"""Chart components for the word graph."""
