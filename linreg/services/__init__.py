"""Services built around the core: persistence, inference, plotting and seeds."""
