"""Hospital lookup application.

Models, services and HTTP views for searching hospitals by region and
specialty, bookmarking them and finding nearby pharmacies.
"""
