"""Region lookup tables used to categorize visitor locations."""

KENYA_COUNTIES: dict[str, list[str]] = {
    "NAIROBI": [
        "Nairobi", "Westlands", "Kilimani", "Kasarani", "Embakasi", "Dagoretti", "Langata",
        "Karen", "Ngara", "Parklands", "Lavington", "Runda", "Muthaiga", "South B", "South C",
        "Roysambu", "Kileleshwa", "Hurlingham", "Upperhill", "Kibera", "Mathare", "Donholm",
        "Buruburu", "Umoja", "Kayole", "Komarock",
    ],
    "MOMBASA": [
        "Mombasa", "Nyali", "Bamburi", "Shanzu", "Kisauni", "Likoni", "Changamwe", "Jomvu",
        "Port Reitz", "Tudor", "Buxton", "Mikindani",
    ],
    "KILIFI": [
        "Kilifi", "Malindi", "Watamu", "Mtwapa", "Gongoni", "Mida", "Gede", "Kaloleni",
        "Mariakani", "Mazeras", "Vipingo", "Takaungu",
    ],
    "KWALE": ["Kwale", "Ukunda", "Diani", "Msambweni", "Kinango", "Lunga Lunga"],
    "LAMU": ["Lamu", "Mpeketoni", "Witu", "Faza", "Kizingitini"],
    "TAITA TAVETA": ["Voi", "Taveta", "Wundanyi", "Mwatate", "Bura"],
    "TANA RIVER": ["Hola", "Garsen", "Bura", "Madogo", "Kipini"],
    "KISUMU": [
        "Kisumu", "Kondele", "Mamboleo", "Maseno", "Ahero", "Awasi", "Kibos", "Dunga",
        "Nyalenda", "Obunga", "Manyatta", "Milimani",
    ],
    "SIAYA": ["Siaya", "Bondo", "Ugunja", "Yala", "Ukwala"],
    "KISII": ["Kisii", "Ogembo", "Keroka", "Suneka", "Nyamache"],
    "NYAMIRA": ["Nyamira", "Keroka", "Nyansiongo", "Manga", "Borabu"],
    "HOMA BAY": ["Homa Bay", "Mbita", "Ndhiwa", "Oyugis", "Kendu Bay"],
    "MIGORI": ["Migori", "Rongo", "Awendo", "Kehancha", "Isebania"],
    "BUSIA": ["Busia", "Malaba", "Bumala", "Matayos", "Nambale"],
    "NAKURU": [
        "Nakuru", "Naivasha", "Gilgil", "Molo", "Njoro", "Rongai", "Kampi Ya Moto", "Subukia",
        "Bahati", "London", "Lanet", "Pipeline",
    ],
    "KAJIADO": [
        "Kajiado", "Ngong", "Kitengela", "Rongai", "Isinya", "Loitokitok", "Ongata Rongai",
        "Kiserian", "Magadi", "Namanga", "Bissil",
    ],
    "NAROK": ["Narok", "Kilgoris", "Mau Narok", "Suswa", "Ololulunga"],
    "BARINGO": ["Kabarnet", "Marigat", "Eldama Ravine", "Mogotio", "Baringo"],
    "ELGEYO MARAKWET": ["Iten", "Kapsowar", "Kapcherop", "Tambach", "Chepkorio"],
    "KERICHO": ["Kericho", "Litein", "Londiani", "Kipkelion", "Fort Ternan"],
    "BOMET": ["Bomet", "Sotik", "Longisa", "Mulot", "Sigor"],
    "NANDI": ["Kapsabet", "Mosoriot", "Nandi Hills", "Kobujoi", "Kabiyet"],
    "TRANS NZOIA": ["Kitale", "Kiminini", "Endebess", "Kwanza", "Cherangany"],
    "WEST POKOT": ["Kapenguria", "Makutano", "Chepareria", "Sigor", "Ortum"],
    "SAMBURU": ["Maralal", "Baragoi", "Wamba", "Archers Post", "Barsaloi"],
    "LAIKIPIA": ["Nanyuki", "Nyahururu", "Rumuruti", "Sipili", "Doldol"],
    "UASIN GISHU": [
        "Eldoret", "Turbo", "Burnt Forest", "Moiben", "Kesses", "Ziwa", "Iten", "Langas",
        "Pioneer", "Kipkaren", "Kapseret", "Ainabkoi",
    ],
    "KIAMBU": [
        "Kiambu", "Thika", "Ruiru", "Kikuyu", "Gachie", "Two Rivers", "Limuru", "Juja",
        "Kahawa", "Githunguri", "Kabete", "Karuri", "Kiambu Town",
    ],
    "MURANG'A": [
        "Murang'a", "Kenol", "Kangema", "Maragua", "Gatanga", "Sabasaba", "Makuyu", "Kandara",
        "Kigumo", "Kahuro",
    ],
    "KIRINYAGA": ["Kerugoya", "Kutus", "Sagana", "Baricho", "Wang'uru"],
    "NYERI": [
        "Nyeri", "Karatina", "Othaya", "Mweiga", "Nanyuki", "Endarasha", "Mukuruweini", "Tetu",
        "Mathira", "Kieni", "Narumoru",
    ],
    "NYANDARUA": ["Ol Kalou", "Nyahururu", "Engineer", "Shamata", "Ndaragwa"],
    "MACHAKOS": [
        "Machakos", "Athi River", "Mlolongo", "Kangundo", "Tala", "Masii", "Kathiani",
        "Matungulu", "Mwala", "Yatta", "Syokimau",
    ],
    "MAKUENI": ["Wote", "Makindu", "Kibwezi", "Emali", "Mtito Andei"],
    "KITUI": ["Kitui", "Mwingi", "Mutomo", "Ikutha", "Kyuso"],
    "KAKAMEGA": [
        "Kakamega", "Mumias", "Butere", "Malava", "Khayega", "Luanda", "Sabatia", "Shinyalu",
        "Ikolomani", "Shianda", "Mahiakalo",
    ],
    "VIHIGA": ["Mbale", "Majengo", "Luanda", "Hamisi", "Chavakali"],
    "BUNGOMA": [
        "Bungoma", "Webuye", "Chwele", "Kimilili", "Milo", "Misikhu", "Bokoli", "Sirisia",
        "Bumala", "Kanduyi", "Kabuchai",
    ],
    "MERU": [
        "Meru", "Maua", "Mikinduri", "Nanyuki", "Nkubu", "Kionyo", "Chogoria", "Timau",
        "Meru Town", "Kiirua", "Tigania",
    ],
    "THARAKA NITHI": ["Chuka", "Chogoria", "Kathwana", "Marimanti", "Magumoni"],
    "EMBU": ["Embu", "Siakago", "Runyenjes", "Kiritiri", "Ishiara"],
    "MARSABIT": ["Marsabit", "Moyale", "Loiyangalani", "Sololo", "Laisamis"],
    "ISIOLO": ["Isiolo", "Merti", "Garbatulla", "Kinna", "Sericho"],
    "GARISSA": ["Garissa", "Dadaab", "Hulugho", "Masalani", "Modogashe"],
    "WAJIR": ["Wajir", "Buna", "Habaswein", "Tarbaj", "Griftu"],
    "MANDERA": ["Mandera", "Rhamu", "Elwak", "Takaba", "Banisa"],
    "TURKANA": ["Lodwar", "Kakuma", "Kalokol", "Lokichoggio", "Lokitaung"],
}

EAST_AFRICA = [
    "Uganda", "Tanzania", "Rwanda", "Burundi", "South Sudan", "Kampala", "Dar es Salaam",
    "Kigali", "Bujumbura", "Juba", "Arusha", "Mwanza", "Dodoma", "Entebbe", "Mbarara",
    "Zanzibar", "Mbeya", "Morogoro", "Tanga", "Bukoba",
]

AFRICA = [
    "Nigeria", "South Africa", "Egypt", "Ethiopia", "Ghana", "Morocco", "Algeria", "Tunisia",
    "Senegal", "Zimbabwe", "Zambia", "Mozambique", "Botswana", "Namibia", "Mali", "Sudan",
    "Somalia", "Libya", "Angola", "Cameroon", "Ivory Coast", "Madagascar", "Malawi",
    "Mauritius", "Congo", "DRC", "Chad", "Niger", "Benin", "Togo", "Gabon", "Lesotho",
    "Swaziland", "Eritrea", "Djibouti", "Gambia", "Guinea", "Sierra Leone", "Liberia",
    "Burkina Faso",
]

GLOBAL = [
    "United States", "United Kingdom", "Canada", "Australia", "Germany", "France", "China",
    "India", "Japan", "Brazil", "Mexico", "Spain", "Italy", "Netherlands", "Sweden",
    "Switzerland", "Singapore", "Dubai", "UAE", "Russia", "Poland", "Belgium", "Austria",
    "Norway", "Denmark", "Finland", "Ireland", "Portugal", "Greece", "New Zealand",
    "Argentina", "Chile", "Colombia", "Peru", "Venezuela", "Thailand", "Malaysia",
    "Indonesia", "Philippines", "Vietnam", "South Korea", "Saudi Arabia", "Turkey", "Israel",
    "Pakistan", "Bangladesh",
]
