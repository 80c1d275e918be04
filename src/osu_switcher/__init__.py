"""osu!stable server+account switcher."""
