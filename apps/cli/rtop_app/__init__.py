"""Command-line front end for the rtop renderer."""
