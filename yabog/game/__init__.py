"""YABOG simulation: entities, physics, board layout and skins."""
