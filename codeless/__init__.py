"""codeless-koan: fetch a random case from The Codeless Code and print it."""
