"""Writers for the migrated WXR document and companion SQL files."""
