"""Configuration, logging, resource paths and the event bus."""
