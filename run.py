"""启动脚本"""

import uvicorn
from chartconf.core.config import settings
from chartconf.utils.logger import log


if __name__ == "__main__":
    log.info("="*60)
    log.info("chartconf - 启动中")
    log.info("="*60)
    log.info(f"服务地址: http://{settings.api_host}:{settings.api_port}")
    log.info(f"API 文档: http://{settings.api_host}:{settings.api_port}/docs")
    log.info(f"调试模式: {settings.debug}")
    log.info(f"图表上限: {settings.max_charts} (TTL {settings.chart_ttl_hours}h)")
    log.info("="*60)

    uvicorn.run(
        "chartconf.api.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.debug,
        log_level="info"
    )
