"""Image rendering for the Open Graph preview."""
