"""
Pipeline that computes and draws a spanning tree and a shortest path.
"""

from .pipeline import PipelineStep, PipelineConfig, PlotResult, MSTPipeline

__all__ = ['PipelineStep', 'PipelineConfig', 'PlotResult', 'MSTPipeline']
