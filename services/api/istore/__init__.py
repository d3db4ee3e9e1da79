"""iStore storefront API."""
