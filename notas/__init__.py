"""Notas: notes and tasks home screen."""
