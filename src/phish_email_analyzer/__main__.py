"""CLI entrypoint for phish_email_analyzer."""

from __future__ import annotations

from phish_email_analyzer.cli import main

if __name__ == "__main__":
    main()
