"""Command-line interface for flutterfire_cli."""
