"""Utility helpers for md2whatsapp."""
