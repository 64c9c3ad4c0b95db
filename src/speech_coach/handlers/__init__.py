from .analysis_handler import AnalysisHandler, PipelineStage
from .recording_handler import RecordingHandler

__all__ = ["AnalysisHandler", "PipelineStage", "RecordingHandler"]
