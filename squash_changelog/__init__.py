"""Changelog extraction for squash-merge git workflows."""
