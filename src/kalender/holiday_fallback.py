# SPDX-License-Identifier: MIT

from kalender.model.holiday import Holiday
from kalender.time import date_from_key

# Known days off for the current operating year, used when the feed is down
FALLBACK_HOLIDAYS: dict[str, str] = {
    "2025-01-01": "Hari Tahun Baru",
    "2025-01-27": "Isra Mikraj Nabi Muhammad",
    "2025-01-28": "Cuti Bersama Tahun Baru Imlek",
    "2025-01-29": "Tahun Baru Imlek",
    "2025-03-28": "Cuti Bersama Hari Suci Nyepi (Tahun Baru Saka)",
    "2025-03-29": "Hari Suci Nyepi (Tahun Baru Saka)",
    "2025-03-31": "Hari Idul Fitri",
    "2025-04-01": "Hari Idul Fitri",
    "2025-04-02": "Cuti Bersama Idul Fitri",
    "2025-04-03": "Cuti Bersama Idul Fitri",
    "2025-04-04": "Cuti Bersama Idul Fitri",
    "2025-04-07": "Cuti Bersama Idul Fitri",
    "2025-04-18": "Wafat Isa Almasih",
    "2025-04-20": "Hari Paskah",
    "2025-05-01": "Hari Buruh Internasional / Pekerja",
    "2025-05-12": "Hari Raya Waisak",
    "2025-05-13": "Cuti Bersama Waisak",
    "2025-05-29": "Kenaikan Isa Al Masih",
    "2025-05-30": "Cuti Bersama Kenaikan Isa Al Masih",
    "2025-06-01": "Hari Lahir Pancasila",
    "2025-06-06": "Idul Adha (Lebaran Haji) (belum pasti)",
    "2025-06-09": "Idul Adha (Lebaran Haji)",
    "2025-06-27": "Satu Muharam / Tahun Baru Hijriah (belum pasti)",
    "2025-08-17": "Hari Proklamasi Kemerdekaan R.I.",
    "2025-09-05": "Maulid Nabi Muhammad (belum pasti)",
    "2025-12-25": "Hari Raya Natal",
    "2025-12-26": "Cuti Bersama Natal (Hari Tinju)",
}


def get_fallback_holidays() -> list[Holiday]:
    return [
        {"date": date_from_key(key), "name": name, "is_day_off": True}
        for key, name in FALLBACK_HOLIDAYS.items()
    ]
