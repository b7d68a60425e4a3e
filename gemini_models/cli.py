import asyncio
import json
from typing import Any, Dict, Optional, Tuple

import httpx

from gemini_models.lister import ModelLister
from gemini_models.settings import Settings


async def run(settings: Settings, client: Optional[httpx.AsyncClient] = None) -> Tuple[Dict[str, Any], ...]:
    lister = ModelLister.from_settings(settings, client=client)
    models = await lister.list_models()
    print(json.dumps(list(models), indent=2, ensure_ascii=False))
    return models


def main() -> None:
    # No flags. Errors propagate: traceback on stderr, exit status 1.
    asyncio.run(run(Settings.from_env()))


if __name__ == "__main__":
    main()
