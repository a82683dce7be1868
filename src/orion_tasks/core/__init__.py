"""Engine-facing interfaces."""
