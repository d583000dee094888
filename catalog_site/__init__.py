"""
Product Catalog Browser

Modules:
    models      - Data models (Product, Gallery)
    common      - Shared utilities (config loader, CSV parsing, logging, errors)
    catalog     - Catalog loading, filtering and dropdown options
    images      - Image manifest handling and gallery resolution
    rendering   - Visual tree builders, gallery slider, HTML adapter
    pages       - Listing and detail page controllers
    site        - Static site builder, preview server, catalog audit
"""
