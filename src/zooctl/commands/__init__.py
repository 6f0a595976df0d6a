"""Click plumbing shared by the zooctl entry point."""
