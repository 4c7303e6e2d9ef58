"""FastAPI 主应用"""

from fastapi import FastAPI, HTTPException, Path
from fastapi.encoders import jsonable_encoder
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from chartconf.core.config import settings
from chartconf.engines.chart import Chart
from chartconf.engines.chart_manager import get_chart_manager
from chartconf.engines.data_converter import get_data_converter
from chartconf.engines.serializer import to_dict
from chartconf.engines.tool_executor import ToolExecutionError, get_tool_executor
from chartconf.models.configuration import AXIS_FIELDS
from chartconf.models.enums import AxisDimension
from chartconf.models.response import (
    AddSeriesRequest, ApplyOptionsRequest, ChartResponse, ClientCallsResponse,
    CreateChartRequest, ExtremesRequest, ToolRequest, ToolResponse,
)
from chartconf.tools import TOOL_REGISTRY, get_all_tool_schemas
from chartconf.utils.logger import log


# 创建应用
app = FastAPI(
    title="chartconf",
    description="Highcharts 配置对象服务",
    version="0.1.0",
    debug=settings.debug
)

# CORS 配置
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _get_chart(chart_id: str) -> Chart:
    """获取图表，不存在时返回 404"""
    try:
        return get_chart_manager().get_chart(chart_id)
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))


def _chart_response(chart_id: str, chart: Chart, applied=None) -> ChartResponse:
    return ChartResponse(
        chart_id=chart_id,
        configuration=to_dict(chart.configuration),
        applied=applied or []
    )


@app.get("/")
async def root():
    """根路径"""
    return {
        "name": "chartconf",
        "version": "0.1.0",
        "status": "running"
    }


@app.get("/health")
async def health():
    """健康检查"""
    return {"status": "healthy", "charts": get_chart_manager().get_stats()}


@app.post("/charts", response_model=ChartResponse)
async def create_chart(request: CreateChartRequest):
    """
    创建图表

    Args:
        type: 图表类型
        timeline: 是否启用时间轴模式
        options: 初始 Highcharts 选项（可选）
    """
    manager = get_chart_manager()
    try:
        chart_id = manager.create_chart(request.type, timeline=request.timeline)
    except ValueError as e:
        log.error(f"创建图表失败: {e}")
        raise HTTPException(status_code=400, detail=str(e))

    chart = manager.get_chart(chart_id)
    applied = []
    if request.options:
        try:
            applied = chart.apply_options(request.options)
        except ValueError as e:
            manager.delete_chart(chart_id)
            raise HTTPException(status_code=400, detail=str(e))

    return _chart_response(chart_id, chart, applied)


@app.get("/charts/{chart_id}", response_model=ChartResponse)
async def get_chart(chart_id: str):
    """获取图表配置"""
    chart = _get_chart(chart_id)
    return _chart_response(chart_id, chart)


@app.put("/charts/{chart_id}/config", response_model=ChartResponse)
async def apply_options(chart_id: str, request: ApplyOptionsRequest):
    """合并 Highcharts 选项并重新绘制"""
    chart = _get_chart(chart_id)
    try:
        applied = chart.apply_options(request.options)
    except ValueError as e:
        log.error(f"合并配置失败: {e}")
        raise HTTPException(status_code=400, detail=str(e))

    return _chart_response(chart_id, chart, applied)


@app.post("/charts/{chart_id}/series", response_model=ChartResponse)
async def add_series(chart_id: str, request: AddSeriesRequest):
    """把查询结果转换为数据序列并添加到图表"""
    chart = _get_chart(chart_id)
    try:
        series = get_data_converter().convert(request.rows)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))

    series.name = request.name
    series.type = request.type
    chart.configuration.add_series(series)
    log.info(f"图表 {chart_id} 添加序列: {series.size()} 个数据点")

    return _chart_response(chart_id, chart)


@app.post("/charts/{chart_id}/axes/{dimension}/{index}/extremes", response_model=ChartResponse)
async def set_extremes(
    chart_id: str,
    request: ExtremesRequest,
    dimension: int = Path(..., ge=0, le=3, description="坐标轴维度"),
    index: int = Path(..., ge=0, description="坐标轴序号")
):
    """设置坐标轴范围"""
    chart = _get_chart(chart_id)
    axis_dimension = AxisDimension(dimension)

    axis = chart.configuration.get_axis_at(axis_dimension, index)
    if axis is None and index == 0:
        _, axis_class = AXIS_FIELDS[axis_dimension]
        axis = axis_class()
        chart.configuration.add_axis(axis)
    if axis is None:
        raise HTTPException(status_code=404, detail=f"坐标轴不存在: {axis_dimension.name}[{index}]")

    axis.set_extremes(request.min, request.max, redraw=request.redraw, animate=request.animate)
    return _chart_response(chart_id, chart)


@app.post("/charts/{chart_id}/reset-zoom")
async def reset_zoom(chart_id: str):
    """重置缩放"""
    chart = _get_chart(chart_id)
    chart.configuration.reset_zoom()
    return {"chart_id": chart_id, "pending_calls": len(chart.pending_calls())}


@app.get("/charts/{chart_id}/calls", response_model=ClientCallsResponse)
async def drain_calls(chart_id: str):
    """取出待执行的客户端调用"""
    chart = _get_chart(chart_id)
    calls = [call.model_dump() for call in chart.drain_calls()]
    return ClientCallsResponse(chart_id=chart_id, calls=calls)


@app.delete("/charts/{chart_id}")
async def delete_chart(chart_id: str):
    """删除图表"""
    try:
        get_chart_manager().delete_chart(chart_id)
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))
    return {"chart_id": chart_id, "deleted": True}


@app.get("/tools")
async def list_tools():
    """获取所有工具的 Schema"""
    return {"tools": get_all_tool_schemas()}


@app.post("/tools/{tool_name}", response_model=ToolResponse)
async def execute_tool(tool_name: str, request: ToolRequest):
    """执行工具调用"""
    if tool_name not in TOOL_REGISTRY:
        raise HTTPException(status_code=404, detail=f"未知工具: {tool_name}")

    try:
        result = get_tool_executor().execute(tool_name, request.args)
    except ToolExecutionError as e:
        status_code = 422 if e.code == "VALIDATION_ERROR" else 400
        response = ToolResponse(
            success=False,
            error=str(e),
            error_code=e.code,
            error_detail=e.detail
        )
        return JSONResponse(status_code=status_code, content=jsonable_encoder(response))

    return ToolResponse(success=True, result=result)


if __name__ == "__main__":
    import uvicorn

    log.info(f"启动服务: {settings.api_host}:{settings.api_port}")

    uvicorn.run(
        "chartconf.api.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.debug
    )
