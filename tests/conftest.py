from __future__ import annotations

import pytest

from indoormap.observers.base import MapObserver


SAMPLE_MAP = """<?xml version="1.0" encoding="UTF-8"?>
<map width="20" depth="15">
  <earthReg>
    <correspondences>
      <point lat="49.0" lon="9.0" alt="300" mx="0" my="0" mz="0"/>
      <point lat="49.001" lon="9.001" alt="301" mx="10" my="10" mz="1"/>
    </correspondences>
  </earthReg>
  <floors>
    <floor atHeight="0" height="3.0" name="ground">
      <outline>
        <polygon name="hall" method="0" outdoor="false">
          <point x="0" y="0"/><point x="10" y="0"/><point x="10" y="8"/><point x="0" y="8"/>
        </polygon>
        <polygon name="shaft" method="1" outdoor="false">
          <point x="4" y="4"/><point x="5" y="4"/><point x="5" y="5"/><point x="4" y="5"/>
        </polygon>
        <polygon name="yard" method="0" outdoor="true">
          <point x="10" y="0"/><point x="20" y="0"/><point x="20" y="15"/><point x="10" y="15"/>
        </polygon>
      </outline>
      <obstacles>
        <wall material="1" type="1" x1="0" y1="0" x2="10" y2="0" height="0">
          <door type="1" material="2" x01="0.5" width="1" heigth="2" lr="false" io="false"/>
        </wall>
        <wall material="3" type="1" x1="10" y1="0" x2="10" y2="8" thickness="0.2" height="2.5">
          <window material="4" x01="0.5" y="1" width="2" height="1.2" io="true"/>
        </wall>
        <wall material="0" type="1" x1="0" y1="8" x2="10" y2="8"/>
      </obstacles>
      <pois>
        <poi name="Lobby" type="0" x="5" y="4"/>
      </pois>
      <gtpoints>
        <gtpoint id="7" x="1" y="2" z="0.5"/>
        <gtpoint id="8" x="3" y="2" z="0.5"/>
      </gtpoints>
      <accesspoints>
        <accesspoint name="ap1" mac="00:11:22:33:44:55" x="2" y="3" z="2.5"
                     mdl_txp="-40" mdl_exp="2.5" mdl_waf="8"/>
      </accesspoints>
      <beacons>
        <beacon name="b1" mac="AA:BB:CC:DD:EE:FF" uuid="u-1" major="1" minor="2"
                x="4" y="4" z="1" mdl_txp="-60" mdl_exp="2" mdl_waf="5"/>
      </beacons>
      <fingerprints>
        <location name="fp1" x="6" y="6" dz="1.3"/>
      </fingerprints>
    </floor>
    <floor atHeight="10" height="4" name="first">
      <gtpoints>
        <gtpoint id="7" x="1" y="2" z="0.5"/>
      </gtpoints>
    </floor>
  </floors>
</map>
"""


class RecordingObserver(MapObserver):
    """Records the name of every hook called, in order."""

    def __init__(self) -> None:
        self.calls: list[str] = []


def _recording_hook(name: str):
    def hook(self, entity):
        self.calls.append(name)
        return getattr(MapObserver, name)(self, entity)
    return hook


for _name in [n for n in vars(MapObserver) if n.startswith(("enter_", "leave_"))]:
    setattr(RecordingObserver, _name, _recording_hook(_name))


@pytest.fixture
def sample_xml() -> str:
    return SAMPLE_MAP


@pytest.fixture
def recorder() -> RecordingObserver:
    return RecordingObserver()
