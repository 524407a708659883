"""HTTP routers: JSON API under /api and the HTML pages."""
