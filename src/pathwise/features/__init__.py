"""Feature packages: path values and the helpers they build on."""
