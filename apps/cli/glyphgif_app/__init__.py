"""Command-line front end for glyphgif."""
