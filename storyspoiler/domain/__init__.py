"""Domain layer: error contracts of the Story Spoiler API clients."""
