"""Services for Wine Collection."""
