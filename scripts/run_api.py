#!/usr/bin/env python3
"""
SymptomTrail — Запуск API сервера

Запуск:
    python scripts/run_api.py
    python scripts/run_api.py --port 8080
    python scripts/run_api.py --catalog-url http://localhost:9000 --config config.yaml
"""

import os
import sys
import argparse
from pathlib import Path

# Додаємо корінь проекту до path
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root))


def main():
    parser = argparse.ArgumentParser(description='SymptomTrail API Server')
    parser.add_argument('--host', default='0.0.0.0', help='Host (default: 0.0.0.0)')
    parser.add_argument('--port', type=int, default=8000, help='Port (default: 8000)')
    parser.add_argument('--reload', action='store_true', help='Enable auto-reload')
    parser.add_argument('--workers', type=int, default=1, help='Number of workers')
    parser.add_argument('--config', default=None, help='YAML конфігурація SymptomTrail')
    parser.add_argument('--catalog-url', default=None, help='Зовнішній каталог симптомів')

    args = parser.parse_args()

    # Налаштування передаються в app через environment (APIConfig.from_env)
    os.environ["SYMPTOM_TRAIL_HOST"] = args.host
    os.environ["SYMPTOM_TRAIL_PORT"] = str(args.port)
    if args.config:
        os.environ["SYMPTOM_TRAIL_CONFIG"] = args.config
    if args.catalog_url:
        os.environ["SYMPTOM_TRAIL_CATALOG_URL"] = args.catalog_url

    print("=" * 60)
    print("🩺 SymptomTrail — API Server")
    print("=" * 60)
    print(f"   Host: {args.host}")
    print(f"   Port: {args.port}")
    print(f"   Reload: {args.reload}")
    print(f"   Config: {args.config or 'default'}")
    print(f"   Catalog: {args.catalog_url or 'built-in'}")
    print("=" * 60)

    import uvicorn

    # workers > 1 означає окремі процеси з власними сесіями в пам'яті
    uvicorn.run(
        "symptom_trail.api.app:app",
        host=args.host,
        port=args.port,
        reload=args.reload,
        workers=args.workers if not args.reload else 1,
        log_level="info",
    )


if __name__ == "__main__":
    main()
