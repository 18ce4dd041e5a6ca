"""Pantry - ingredient social graph backed by Neo4j."""
