"""Asset Tracker: assets, categories and locations with an audit trail."""
