"""Sample upstream product records - one flat and one hierarchical menu."""

# Flat menu: only `grupIsim`, every group is a top category
FLAT_MENU = [
    {"urunAdi": "Mercimek Çorbası", "resimYolu": "", "aciklama": "Günün çorbası", "fiyat": 90, "grupIsim": "Çorbalar"},
    {"urunAdi": "Izgara Köfte", "resimYolu": "", "aciklama": "Pilav ve salata ile", "fiyat": 320, "grupIsim": "Ana Yemekler"},
    {"urunAdi": "Ezogelin Çorbası", "resimYolu": "", "aciklama": None, "fiyat": 90, "grupIsim": "Çorbalar"},
    {"urunAdi": "Tavuk Şiş", "resimYolu": "", "aciklama": "Közlenmiş biber ile", "fiyat": 280, "grupIsim": "Ana Yemekler"},
    {"urunAdi": "Ayran", "resimYolu": "", "aciklama": "", "fiyat": 35, "grupIsim": "İçecekler"},
    {"urunAdi": "Künefe", "resimYolu": "", "aciklama": "Antep fıstıklı", "fiyat": 180, "grupIsim": "Tatlılar"},
]

# Hierarchical menu: `ustGrupIsim` present, explicit `sira` inside groups
HIERARCHICAL_MENU = [
    {"id": 1, "urunAdi": "Türk Kahvesi", "fiyat": 60, "grupIsim": "Sıcak İçecekler", "ustGrupIsim": "İçecekler", "sira": 2},
    {"id": 2, "urunAdi": "Çay", "fiyat": 20, "grupIsim": "Sıcak İçecekler", "ustGrupIsim": "İçecekler", "sira": 1},
    {"id": 3, "urunAdi": "Kola", "fiyat": 45, "grupIsim": "Soğuk İçecekler", "ustGrupIsim": "İçecekler"},
    {"id": 4, "urunAdi": "Adana Kebap", "fiyat": 350, "grupIsim": "Kebaplar", "ustGrupIsim": "Yemekler"},
    {"id": 5, "urunAdi": "Lahmacun", "fiyat": 110, "grupIsim": "Pideler", "ustGrupIsim": "Yemekler"},
    {"id": 6, "urunAdi": "Urfa Kebap", "fiyat": 340, "grupIsim": "Kebaplar", "ustGrupIsim": "Yemekler"},
    {"id": 7, "urunAdi": "Sütlaç", "fiyat": 95, "grupIsim": "Sütlü Tatlılar", "ustGrupIsim": "Tatlılar"},
]

SAMPLE_MENUS = {
    "flat": FLAT_MENU,
    "hierarchical": HIERARCHICAL_MENU,
}
