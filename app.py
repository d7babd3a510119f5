#!/usr/bin/env python3
"""Hugging Face Spaces entry point for Rhyme Scout."""

from rhyme_scout.app.app import main

if __name__ == "__main__":
    main()
