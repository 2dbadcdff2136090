"""
Export strategies, request parsing and the export manager.

Data exports are read back through the input strategies to check the
written layout matches the simulated positions.
"""

import io
import os

import pytest
from PIL import Image

from src.managers.export.csv_export_strategy import CsvExportStrategy
from src.managers.export.excel_export_strategy import ExcelExportStrategy
from src.managers.export.png_export_strategy import PngExportStrategy
from src.managers.export.export_manager import ExportManager
from src.managers.export.export_request_interpreter import ExportRequestInterpreter
from src.managers.input.input_manager import InputManager
from src.managers.network.network_factory import NetworkFactory


@pytest.fixture
def network():
    return NetworkFactory.random_network(5, 6, seed=11, meta_data={"drag": 0.5})


@pytest.fixture
def positions(network):
    return {node: (node.n_x + 1.0, node.n_y - 2.0) for node in network.get_nodes()}


def read_back(tmp_path, files):
    (name, content), = files
    path = tmp_path / name
    path.write_bytes(content)
    return InputManager().get_network(str(path))


@pytest.mark.parametrize("strategy", [CsvExportStrategy(), ExcelExportStrategy()])
def test_data_export_reads_back_at_current_positions(strategy, network, positions, tmp_path):
    loaded = read_back(tmp_path, strategy.generate_export(network, positions))

    for node in network.get_nodes():
        x, y = positions[node]
        assert loaded.get_node_by_id(node.get_id()).get_location() == pytest.approx((x, y))
    assert loaded.adjacent_pairs() == network.adjacent_pairs()
    assert loaded.get_meta_data() == {"drag": 0.5}


def test_data_export_without_positions_uses_locations(network, tmp_path):
    loaded = read_back(tmp_path, CsvExportStrategy().generate_export(network, {}))
    for node in network.get_nodes():
        assert loaded.get_node_by_id(node.get_id()).get_location() == pytest.approx(node.get_location())


def test_png_export(network, positions):
    (name, content), = PngExportStrategy(size=(320, 240)).generate_export(network, positions)
    assert name.endswith(".png")
    image = Image.open(io.BytesIO(content))
    assert image.size == (320, 240)


def test_png_export_of_empty_network():
    empty = NetworkFactory.random_network(0, 0)
    image = PngExportStrategy(size=(50, 40)).create_image(empty, {})
    assert image.size == (50, 40)


def test_fit_keeps_points_inside_padding():
    to_pixel = PngExportStrategy().fit([(0, 0), (10, 5)], (200, 100), 10)
    for point in [(0, 0), (10, 5)]:
        px, py = to_pixel(*point)
        assert 10 <= px <= 190
        assert 10 <= py <= 90


class TestExportRequestInterpreter:

    def test_parse_both_strategies(self):
        request = ExportRequestInterpreter().parse_request(
            "export_request csv_data_export_strategy png_image_export_strategy /tmp/out dir")
        assert isinstance(request["data_export_strategy"], CsvExportStrategy)
        assert isinstance(request["image_export_strategy"], PngExportStrategy)
        assert request["folder_location"] == "/tmp/out dir"

    def test_parse_data_only(self):
        request = ExportRequestInterpreter().parse_request("export_request excel_data_export_strategy none out")
        assert isinstance(request["data_export_strategy"], ExcelExportStrategy)
        assert request["image_export_strategy"] is None

    @pytest.mark.parametrize("request_str", [
        "export csv_data_export_strategy none out",
        "export_request none none out",
        "export_request bogus none out",
        "export_request none bogus out",
        "export_request none png_image_export_strategy none",
        "export_request none png_image_export_strategy",
    ])
    def test_invalid_requests(self, request_str):
        with pytest.raises(ValueError):
            ExportRequestInterpreter().parse_request(request_str)


def test_export_manager_writes_timestamped_folder(network, positions, tmp_path):
    folder = ExportManager().handle_export_request(
        network, positions,
        f"export_request csv_data_export_strategy png_image_export_strategy {tmp_path}")

    assert os.path.dirname(folder) == str(tmp_path)
    assert os.path.basename(folder).startswith("export_")
    assert len(os.listdir(os.path.join(folder, "data_export"))) == 1
    assert os.listdir(os.path.join(folder, "image_export")) == ["network_layout.png"]


def test_export_manager_rejects_file_as_folder(network, positions, tmp_path):
    not_a_folder = tmp_path / "file.txt"
    not_a_folder.write_text("")
    with pytest.raises(ValueError):
        ExportManager().handle_export_request(
            network, positions, f"export_request csv_data_export_strategy none {not_a_folder}")
