"""HTTP surface: issue tokens and authenticate submitted ones."""
