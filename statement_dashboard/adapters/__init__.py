"""Adapters exposing the dashboard to users."""
