#!/usr/bin/env python3
"""
Ledger Service Entry Point

Starts the FastAPI server (port 3333 unless LEDGER_API_PORT says otherwise).
"""

import sys
from pathlib import Path

# Add the project root to Python path
project_root = Path(__file__).parent
sys.path.insert(0, str(project_root))

from ledger_service.api import run_server
from ledger_service.config import get_config


if __name__ == "__main__":
    config = get_config()
    print("🏦 Starting Ledger Service...")
    print(f"🌐 API available at: http://{config.api_host}:{config.api_port}")
    print(f"📚 Documentation at: http://{config.api_host}:{config.api_port}/docs")
    print()

    try:
        run_server()
    except KeyboardInterrupt:
        print("\n👋 Shutting down Ledger Service...")
    except Exception as e:
        print(f"❌ Error starting server: {e}")
        sys.exit(1)
