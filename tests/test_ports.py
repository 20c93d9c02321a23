"""
Tests for the reader/writer contracts using doubles in place of real formats.
"""

from unittest.mock import Mock

import pytest

from treegraph.core.matrix_writer import IncidenceMatrixWriter
from treegraph.core.node import GraphNode
from treegraph.core.ports import FormatError, GraphReader, GraphWriter


class StubGraphReader(GraphReader):
    def __init__(self):
        self.called = False

    def read(self, src):
        self.called = True
        raise FormatError("stub reader always fails")


class StubGraphWriter(GraphWriter):
    def __init__(self):
        self.called = False

    def write(self, graph):
        self.called = True
        raise FormatError("stub writer always fails")


def test_contracts_are_abstract():
    with pytest.raises(TypeError):
        GraphReader()
    with pytest.raises(TypeError):
        GraphWriter()


def test_reader_error_reaches_caller():
    reader = StubGraphReader()
    with pytest.raises(FormatError):
        GraphNode.from_reader(reader, "")
    assert reader.called


def test_writer_error_reaches_caller():
    writer = StubGraphWriter()
    with pytest.raises(FormatError):
        GraphNode(0).write_to_str(writer)
    assert writer.called


def test_mock_reader(sample, sample_twin):
    reader = Mock(spec=GraphReader)
    reader.read.return_value = sample_twin
    assert GraphNode.from_reader(reader, "anything") == sample
    reader.read.assert_called_once_with("anything")


def test_mock_writer_delegates_to_matrix_writer(sample):
    writer = Mock(spec=GraphWriter)
    writer.write.side_effect = IncidenceMatrixWriter().write
    out = sample.write_to_str(writer)
    assert out.startswith("IncidenceMatrix {")
    writer.write.assert_called_once_with(sample)
