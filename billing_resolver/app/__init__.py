"""Application packages for billing snapshot resolution."""
