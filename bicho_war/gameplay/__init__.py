"""
Gameplay core: creatures, board, statistics and the engine that drives them.
NO UI DEPENDENCIES.
"""
