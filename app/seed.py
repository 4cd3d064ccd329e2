import logging
from sqlalchemy.orm import Session

from app.models.driver import Driver
from app.models.engineer import Engineer
from app.models.vehicle import Vehicle

logger = logging.getLogger(__name__)


DEMO_DRIVERS = [
    "Ahmet Demir", "Mehmet Yıldız", "Mustafa Kara", "Zeynep Yılmaz", "Ali Şahin",
    "Hasan Aydın", "Emre Çelik", "Murat Koç", "Fatma Arslan", "Ramazan Güneş",
]

DEMO_PLATES = [
    "06 ABC 123", "34 XYZ 987", "06 KTR 529", "34 YDZ 218", "35 HLM 803", "01 BKC 740",
    "16 NAR 651", "42 RMT 374", "07 ZPL 986", "21 DKN 123", "55 EYT 430", "61 VSK 209",
]

DEMO_ENGINEERS = [
    ("Ali Yıldız",      "Çevre"),
    ("Mehmet Koç",      "İnşaat"),
    ("Ayşe Güneş",      "Ziraat"),
    ("Abdullah Turgut", "Elektrik-Elektronik"),
    ("Serkan Aydınlı",  "Maden"),
    ("Hasan Demir",     "Bilgisayar"),
]


def seed_reference_data(db: Session) -> bool:
    """
    Fill drivers, vehicles and engineers with demo rows.
    Runs only when the drivers table is empty; returns True if rows were added.
    """
    if db.query(Driver.id).first():
        return False

    logger.info("Drivers table is empty, adding demo data")
    db.add_all([Driver(name=n) for n in DEMO_DRIVERS])
    db.add_all([Vehicle(plate=p) for p in DEMO_PLATES])
    db.add_all([Engineer(name=n, branch=b) for n, b in DEMO_ENGINEERS])
    db.commit()
    return True
