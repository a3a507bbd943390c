from asset_tracker.main import run

run()
