from htspkit.status import (
    DESCRAMBLE_INFO_NOT_AVAILABLE,
    DescrambleInfo,
    Quality,
    QueueStatus,
    SourceInfo,
    TimeshiftStatus,
)


def test_not_available_is_minus_one():
    info = DescrambleInfo()
    assert info.pid == -1
    assert info.hops == -1


def test_descramble_info_defaults_not_available():
    info = DescrambleInfo()
    assert info.pid == DESCRAMBLE_INFO_NOT_AVAILABLE
    assert info.caid == DESCRAMBLE_INFO_NOT_AVAILABLE
    assert info.provid == DESCRAMBLE_INFO_NOT_AVAILABLE
    assert info.ecm_time == DESCRAMBLE_INFO_NOT_AVAILABLE
    assert info.hops == DESCRAMBLE_INFO_NOT_AVAILABLE
    assert info.card_system == ""
    assert info.reader == ""
    assert info.from_ == ""
    assert info.protocol == ""


def test_descramble_info_holds_values():
    info = DescrambleInfo()
    info.pid = 100
    info.caid = 0x0500
    info.reader = "reader1"
    assert info.pid == 100
    assert info.caid == 0x0500
    assert info.reader == "reader1"


def test_descramble_info_clear_restores_defaults():
    info = DescrambleInfo(
        pid=1,
        caid=2,
        provid=3,
        ecm_time=4,
        hops=5,
        card_system="cs",
        reader="rd",
        from_="here",
        protocol="proto",
    )
    assert info != DescrambleInfo()
    info.clear()
    assert info == DescrambleInfo()
    assert info.hops == DESCRAMBLE_INFO_NOT_AVAILABLE
    assert info.protocol == ""


def test_quality_defaults_and_clear():
    quality = Quality(fe_status="GOOD", fe_snr=10, fe_signal=20, fe_ber=3, fe_unc=4)
    assert quality.fe_status == "GOOD"
    assert quality.fe_signal == 20
    quality.clear()
    assert quality == Quality()
    assert quality.fe_status == ""
    assert quality.fe_snr == 0
    assert quality.fe_unc == 0


def test_queue_status_defaults_zero():
    status = QueueStatus()
    assert (
        status.packets,
        status.bytes,
        status.delay,
        status.bdrops,
        status.pdrops,
        status.idrops,
    ) == (0, 0, 0, 0, 0, 0)


def test_queue_status_equality():
    assert QueueStatus(packets=5, bytes=100) == QueueStatus(packets=5, bytes=100)
    assert not (QueueStatus(packets=5) == QueueStatus(packets=6))


def test_source_info_clear():
    info = SourceInfo(
        si_adapter="a", si_network="n", si_mux="m", si_provider="p", si_service="s"
    )
    assert info.si_mux == "m"
    info.clear()
    assert info == SourceInfo()
    assert info.si_service == ""


def test_timeshift_status_defaults_and_clear():
    status = TimeshiftStatus()
    assert status.full is False
    assert status.shift == 0
    status.full = True
    status.shift = -500
    status.start = 1000
    status.end = 2000
    assert status.end == 2000
    status.clear()
    assert status == TimeshiftStatus()
    assert status.full is False
    assert status.start == 0


def test_clear_keeps_instance_identity():
    status = TimeshiftStatus(full=True)
    same = status
    status.clear()
    assert same is status
    assert same.full is False