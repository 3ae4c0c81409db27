import uvicorn
from selfsnap.main import app
from selfsnap.config import settings

if __name__ == "__main__":
    print("🚀 Starting SelfSnap Photobooth Server...")
    print(f"🌐 Access the photobooth at: http://{settings.host}:{settings.port}")
    print(f"🖼️  Frames table: {settings.ddb_table_name} (served from https://{settings.cloudfront_domain})")
    print(f"📁 Collages will be saved to: {settings.collages_dir}")
    print("\n🎯 Flow:")
    print("   1. Pick a frame and a filter")
    print("   2. Take 4 shots for the 2×2 grid")
    print("   3. Download the finished collage")
    print("\n🛑 Press Ctrl+C to stop the server\n")

    uvicorn.run(
        app,
        host=settings.host,
        port=settings.port,
        reload=settings.debug
    )
