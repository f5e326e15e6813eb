"""
Simple API smoke script to verify the main endpoints against a running server.
Run: python smoke_api.py
"""
import datetime
import requests
import sys

BASE = "http://localhost:8000"

def smoke_endpoints():
    print("Testing Fishing Companion API...\n")

    print("✓ Testing /api/test")
    r = requests.get(f"{BASE}/api/test")
    assert r.status_code == 200

    # Test species seeding
    print("✓ Testing /api/species")
    r = requests.get(f"{BASE}/api/species")
    assert r.status_code == 200
    print(f"  Found {len(r.json())} species")

    # Test trip planning
    print("✓ Testing POST /api/trips")
    tomorrow = (datetime.date.today() + datetime.timedelta(days=1)).isoformat()
    r = requests.post(f"{BASE}/api/trips", json={"name": "Smoke test trip", "date": tomorrow})
    assert r.status_code == 200
    trip = r.json()

    print("✓ Testing GET /api/trips/upcoming")
    r = requests.get(f"{BASE}/api/trips/upcoming")
    assert any(t["id"] == trip["id"] for t in r.json())

    print("✓ Testing DELETE /api/trips/{id}")
    r = requests.delete(f"{BASE}/api/trips/{trip['id']}")
    assert r.status_code == 200

    # Test tides (no API key needed)
    print("✓ Testing GET /api/tides/37.8/-122.4/<today>")
    r = requests.get(f"{BASE}/api/tides/37.8/-122.4/{datetime.date.today().isoformat()}")
    assert r.status_code == 200
    print(f"  Got {len(r.json())} tide samples")

    # Test conditions score (needs OPENWEATHER_API_KEY on the server)
    print("✓ Testing GET /api/conditions/44.9/-93.2")
    r = requests.get(f"{BASE}/api/conditions/44.9/-93.2")
    if r.status_code == 200:
        print(f"  Score {r.json()['score']} ({r.json()['label']})")
    else:
        print(f"  Skipped: {r.json().get('detail')}")

    print("\n✅ All checks passed!")

if __name__ == "__main__":
    try:
        smoke_endpoints()
    except Exception as e:
        print(f"\n❌ Smoke test failed: {e}")
        sys.exit(1)
