"""Utility modules for the reminder tool."""
