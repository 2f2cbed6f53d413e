"""docpage - static API page builder with hosted source links."""
