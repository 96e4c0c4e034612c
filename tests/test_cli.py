from grapho_mst.__main__ import build_config, main, parse_args


def test_build_config_overrides(tmp_path):
    args = parse_args(['--vertices', '12', '--xmax', '20', '--source', '1', '--target', '5',
                       '--vertex-file', str(tmp_path / "v.csv")])
    config = build_config(args)
    assert config.get('vertices') == 12
    assert config.get('bounds')['xmax'] == 20
    assert config.get('bounds')['xmin'] == 0
    assert config.get('source') == 1
    assert config.has_endpoints()


def test_main_renders_and_exports(tmp_path, capsys):
    vertex_file = str(tmp_path / "v.csv")
    output = tmp_path / "mst.png"
    raster = tmp_path / "grid.tif"

    code = main(['--vertices', '15', '--seed', '4', '--vertex-file', vertex_file,
                 '--output', str(output), '--export-raster', str(raster)])
    assert code == 0
    assert output.exists()
    assert raster.exists()
    assert "MST distance" in capsys.readouterr().out

    code = main(['--source', '0', '--target', '14', '--vertex-file', vertex_file,
                 '--export-tree', str(tmp_path / "tree.geojson")])
    assert code == 0
    out = capsys.readouterr().out
    assert "SP 0" in out
    assert (tmp_path / "tree_edges.geojson").exists()


def test_main_reports_failure(tmp_path, capsys):
    code = main(['--vertices', '1', '--vertex-file', str(tmp_path / "v.csv")])
    assert code == 1
    assert "outside 2-500" in capsys.readouterr().out
