"""Shared helpers used across versionroute modules."""
