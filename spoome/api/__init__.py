"""Request and response models for the spoo.me endpoints."""
