"""图表配置模型包"""

from chartconf.models.enums import (
    AxisDimension,
    AxisType,
    ChartType,
    Cursor,
    DashStyle,
    Dimension,
    HorizontalAlign,
    LayoutDirection,
    PanKey,
    Stacking,
    TickmarkPlacement,
    TickPosition,
    VerticalAlign,
    ZoneAxis
)
from chartconf.models.style import (
    Color,
    GradientColor,
    SolidColor,
    Style
)
from chartconf.models.chart import (
    Accessibility,
    ChartModel,
    Credits,
    DataLabels,
    Exporting,
    Legend,
    Loading,
    Marker,
    Navigator,
    NoData,
    Pane,
    RangeSelector,
    Scrollbar,
    SeriesTooltip,
    States,
    Subtitle,
    Time,
    Title,
    Tooltip,
    Zones
)
from chartconf.models.axis import (
    Axis,
    AxisTitle,
    ColorAxis,
    Crosshair,
    Labels,
    PlotBand,
    PlotLine,
    StackLabels,
    XAxis,
    YAxis,
    ZAxis
)
from chartconf.models.plot_options import (
    AbstractPlotOptions,
    PlotOptionsArea,
    PlotOptionsBar,
    PlotOptionsColumn,
    PlotOptionsHeatmap,
    PlotOptionsLine,
    PlotOptionsPie,
    PlotOptionsSeries,
    plot_options_for
)
from chartconf.models.series import (
    DataFrameSeries,
    DataSeries,
    DataSeriesItem,
    Drilldown,
    ListSeries,
    Series
)
from chartconf.models.events import (
    AxisRescaledEvent,
    ConfigurationChangeListener,
    DataAddedEvent,
    DataRemovedEvent,
    DataUpdatedEvent,
    ItemSlicedEvent,
    SeriesAddedEvent,
    SeriesChangedEvent,
    SeriesStateEvent
)
from chartconf.models.configuration import (
    Configuration,
    ConfigurationStateError
)

__all__ = [
    # Enums
    "AxisDimension",
    "AxisType",
    "ChartType",
    "Cursor",
    "DashStyle",
    "Dimension",
    "HorizontalAlign",
    "LayoutDirection",
    "PanKey",
    "Stacking",
    "TickmarkPlacement",
    "TickPosition",
    "VerticalAlign",
    "ZoneAxis",
    # Style
    "Color",
    "GradientColor",
    "SolidColor",
    "Style",
    # Chart
    "Accessibility",
    "ChartModel",
    "Credits",
    "DataLabels",
    "Exporting",
    "Legend",
    "Loading",
    "Marker",
    "Navigator",
    "NoData",
    "Pane",
    "RangeSelector",
    "Scrollbar",
    "SeriesTooltip",
    "States",
    "Subtitle",
    "Time",
    "Title",
    "Tooltip",
    "Zones",
    # Axis
    "Axis",
    "AxisTitle",
    "ColorAxis",
    "Crosshair",
    "Labels",
    "PlotBand",
    "PlotLine",
    "StackLabels",
    "XAxis",
    "YAxis",
    "ZAxis",
    # Plot options
    "AbstractPlotOptions",
    "PlotOptionsArea",
    "PlotOptionsBar",
    "PlotOptionsColumn",
    "PlotOptionsHeatmap",
    "PlotOptionsLine",
    "PlotOptionsPie",
    "PlotOptionsSeries",
    "plot_options_for",
    # Series
    "DataFrameSeries",
    "DataSeries",
    "DataSeriesItem",
    "Drilldown",
    "ListSeries",
    "Series",
    # Events
    "AxisRescaledEvent",
    "ConfigurationChangeListener",
    "DataAddedEvent",
    "DataRemovedEvent",
    "DataUpdatedEvent",
    "ItemSlicedEvent",
    "SeriesAddedEvent",
    "SeriesChangedEvent",
    "SeriesStateEvent",
    # Configuration
    "Configuration",
    "ConfigurationStateError",
]
