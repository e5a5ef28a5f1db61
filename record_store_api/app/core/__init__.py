"""Configuration, logging setup and error types shared by the app."""
