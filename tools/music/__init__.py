"""
Chord tools: text-in, JSON-out wrappers around core.music_theory.
"""
