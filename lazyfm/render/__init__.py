"""Plain-text rendering for listings, menus, and notices."""
