"""GrindFlow client packages."""
