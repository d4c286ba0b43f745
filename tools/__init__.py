"""
Tool layer: ChordTool base, registry, and the chord tools under tools/music.
"""
