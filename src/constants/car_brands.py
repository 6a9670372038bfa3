# Reference catalog of car brands offered for pronunciation practice.
# Phonemes are hyphen-delimited letter-level tokens, not IPA.
CAR_BRANDS = [
    # Popular in Malaysia - Japanese brands
    {
        "id": "perodua",
        "name": "Perodua",
        "phonemes": "p-e-r-o-d-u-a",
        "pronunciation": "peh-ROH-doo-ah",
        "description": "Malaysian automotive manufacturing company, second largest car manufacturer in Malaysia.",
        "country": "Malaysia",
        "founded": "1993",
    },
    {
        "id": "proton",
        "name": "Proton",
        "phonemes": "p-r-o-t-o-n",
        "pronunciation": "PRO-ton",
        "description": "Malaysian automotive company and manufacturer, Malaysia's first national car project.",
        "country": "Malaysia",
        "founded": "1983",
    },
    {
        "id": "toyota",
        "name": "Toyota",
        "phonemes": "t-o-y-o-t-a",
        "pronunciation": "toh-YO-tah",
        "description": "Japanese automotive manufacturer, extremely popular in Malaysia.",
        "country": "Japan",
        "founded": "1937",
    },
    {
        "id": "honda",
        "name": "Honda",
        "phonemes": "h-o-n-d-a",
        "pronunciation": "HON-dah",
        "description": "Japanese multinational conglomerate, very popular in Malaysian market.",
        "country": "Japan",
        "founded": "1946",
    },
    {
        "id": "nissan",
        "name": "Nissan",
        "phonemes": "n-i-s-s-a-n",
        "pronunciation": "NEE-sahn",
        "description": "Japanese multinational automobile manufacturer, strong presence in Malaysia.",
        "country": "Japan",
        "founded": "1933",
    },
    {
        "id": "mazda",
        "name": "Mazda",
        "phonemes": "m-a-z-d-a",
        "pronunciation": "MAHZ-dah",
        "description": "Japanese automotive manufacturer popular in Malaysia for reliability.",
        "country": "Japan",
        "founded": "1920",
    },
    {
        "id": "mitsubishi",
        "name": "Mitsubishi",
        "phonemes": "m-i-t-s-u-b-i-s-h-i",
        "pronunciation": "mit-soo-BEE-shee",
        "description": "Japanese multinational automotive manufacturer with strong Malaysian presence.",
        "country": "Japan",
        "founded": "1970",
    },
    {
        "id": "suzuki",
        "name": "Suzuki",
        "phonemes": "s-u-z-u-k-i",
        "pronunciation": "soo-ZOO-kee",
        "description": "Japanese multinational corporation, popular for small cars in Malaysia.",
        "country": "Japan",
        "founded": "1909",
    },
    {
        "id": "subaru",
        "name": "Subaru",
        "phonemes": "s-u-b-a-r-u",
        "pronunciation": "soo-BAH-roo",
        "description": "Japanese automotive manufacturer known for all-wheel drive vehicles.",
        "country": "Japan",
        "founded": "1953",
    },
    {
        "id": "isuzu",
        "name": "Isuzu",
        "phonemes": "i-s-u-z-u",
        "pronunciation": "ee-SOO-zoo",
        "description": "Japanese commercial vehicle and diesel engine manufacturing company.",
        "country": "Japan",
        "founded": "1916",
    },
    {
        "id": "daihatsu",
        "name": "Daihatsu",
        "phonemes": "d-a-i-h-a-t-s-u",
        "pronunciation": "DAH-ee-hat-soo",
        "description": "Japanese automotive manufacturer specializing in compact cars and kei cars.",
        "country": "Japan",
        "founded": "1907",
    },
    {
        "id": "lexus",
        "name": "Lexus",
        "phonemes": "l-e-x-u-s",
        "pronunciation": "LEK-sus",
        "description": "Luxury vehicle division of Toyota, popular among affluent Malaysians.",
        "country": "Japan",
        "founded": "1989",
    },
    {
        "id": "infiniti",
        "name": "Infiniti",
        "phonemes": "i-n-f-i-n-i-t-i",
        "pronunciation": "in-FIN-ih-tee",
        "description": "Luxury vehicle division of Japanese automaker Nissan.",
        "country": "Japan",
        "founded": "1989",
    },
    {
        "id": "acura",
        "name": "Acura",
        "phonemes": "a-c-u-r-a",
        "pronunciation": "ah-KYUR-ah",
        "description": "Luxury vehicle marque of Japanese automaker Honda.",
        "country": "Japan",
        "founded": "1986",
    },

    # Korean brands popular in Malaysia
    {
        "id": "hyundai",
        "name": "Hyundai",
        "phonemes": "h-y-u-n-d-a-i",
        "pronunciation": "HUN-day",
        "description": "South Korean multinational automotive manufacturer, growing popularity in Malaysia.",
        "country": "South Korea",
        "founded": "1967",
    },
    {
        "id": "kia",
        "name": "Kia",
        "phonemes": "k-i-a",
        "pronunciation": "KEE-ah",
        "description": "South Korean multinational automotive manufacturer, expanding in Malaysian market.",
        "country": "South Korea",
        "founded": "1944",
    },

    # German luxury brands
    {
        "id": "mercedes",
        "name": "Mercedes",
        "phonemes": "m-e-r-c-e-d-e-s",
        "pronunciation": "mer-SAY-deez",
        "description": "German luxury automotive brand, prestigious choice in Malaysia.",
        "country": "Germany",
        "founded": "1926",
    },
    {
        "id": "bmw",
        "name": "BMW",
        "phonemes": "b-m-w",
        "pronunciation": "BEE-em-DOUBLE-you",
        "description": "Bavarian Motor Works, German luxury vehicle manufacturer popular in Malaysia.",
        "country": "Germany",
        "founded": "1916",
    },
    {
        "id": "audi",
        "name": "Audi",
        "phonemes": "a-u-d-i",
        "pronunciation": "AW-dee",
        "description": "German luxury automobile manufacturer, strong presence in Malaysian luxury market.",
        "country": "Germany",
        "founded": "1909",
    },
    {
        "id": "volkswagen",
        "name": "Volkswagen",
        "phonemes": "v-o-l-k-s-w-a-g-e-n",
        "pronunciation": "FOLKS-vah-gen",
        "description": "German automotive manufacturer with growing Malaysian presence.",
        "country": "Germany",
        "founded": "1937",
    },
    {
        "id": "porsche",
        "name": "Porsche",
        "phonemes": "p-o-r-s-c-h-e",
        "pronunciation": "POR-shuh",
        "description": "German automobile manufacturer specializing in high-performance sports cars.",
        "country": "Germany",
        "founded": "1931",
    },
    {
        "id": "mini",
        "name": "Mini",
        "phonemes": "m-i-n-i",
        "pronunciation": "MIN-ee",
        "description": "British automotive marque owned by German automaker BMW.",
        "country": "UK/Germany",
        "founded": "1959",
    },

    # American brands
    {
        "id": "ford",
        "name": "Ford",
        "phonemes": "f-o-r-d",
        "pronunciation": "FORD",
        "description": "American multinational automaker with presence in Malaysia.",
        "country": "USA",
        "founded": "1903",
    },
    {
        "id": "chevrolet",
        "name": "Chevrolet",
        "phonemes": "c-h-e-v-r-o-l-e-t",
        "pronunciation": "SHEV-roh-lay",
        "description": "American automobile division of General Motors.",
        "country": "USA",
        "founded": "1911",
    },
    {
        "id": "cadillac",
        "name": "Cadillac",
        "phonemes": "c-a-d-i-l-l-a-c",
        "pronunciation": "KAD-ih-lak",
        "description": "American luxury automobile manufacturer.",
        "country": "USA",
        "founded": "1902",
    },
    {
        "id": "lincoln",
        "name": "Lincoln",
        "phonemes": "l-i-n-c-o-l-n",
        "pronunciation": "LINK-uhn",
        "description": "Luxury vehicle division of American automaker Ford.",
        "country": "USA",
        "founded": "1917",
    },
    {
        "id": "tesla",
        "name": "Tesla",
        "phonemes": "t-e-s-l-a",
        "pronunciation": "TES-luh",
        "description": "American electric vehicle company gaining interest in Malaysia.",
        "country": "USA",
        "founded": "2003",
    },
    {
        "id": "jeep",
        "name": "Jeep",
        "phonemes": "j-e-e-p",
        "pronunciation": "JEEP",
        "description": "American automobile marque and division of Stellantis.",
        "country": "USA",
        "founded": "1941",
    },

    # Chinese brands
    {
        "id": "geely",
        "name": "Geely",
        "phonemes": "g-e-e-l-y",
        "pronunciation": "GEE-lee",
        "description": "Chinese multinational automotive manufacturing company.",
        "country": "China",
        "founded": "1986",
    },
    {
        "id": "byd",
        "name": "BYD",
        "phonemes": "b-y-d",
        "pronunciation": "BEE-why-DEE",
        "description": "Chinese automobile manufacturer specializing in electric vehicles.",
        "country": "China",
        "founded": "2003",
    },
    {
        "id": "chery",
        "name": "Chery",
        "phonemes": "c-h-e-r-y",
        "pronunciation": "CHER-ee",
        "description": "Chinese automobile manufacturer entering Malaysian market.",
        "country": "China",
        "founded": "1997",
    },
    {
        "id": "haval",
        "name": "Haval",
        "phonemes": "h-a-v-a-l",
        "pronunciation": "HAH-val",
        "description": "Chinese automotive manufacturer, SUV specialist brand.",
        "country": "China",
        "founded": "2013",
    },
    {
        "id": "ora",
        "name": "Ora",
        "phonemes": "o-r-a",
        "pronunciation": "OH-rah",
        "description": "Chinese electric vehicle brand, part of Great Wall Motors.",
        "country": "China",
        "founded": "2018",
    },
    {
        "id": "mg",
        "name": "MG",
        "phonemes": "m-g",
        "pronunciation": "EM-jee",
        "description": "British automotive marque now owned by Chinese company SAIC Motor.",
        "country": "UK/China",
        "founded": "1924",
    },

    # European brands
    {
        "id": "volvo",
        "name": "Volvo",
        "phonemes": "v-o-l-v-o",
        "pronunciation": "VOL-voh",
        "description": "Swedish multinational manufacturing company known for safety.",
        "country": "Sweden",
        "founded": "1927",
    },
    {
        "id": "saab",
        "name": "Saab",
        "phonemes": "s-a-a-b",
        "pronunciation": "SAHB",
        "description": "Swedish car manufacturer known for innovative design.",
        "country": "Sweden",
        "founded": "1945",
    },
    {
        "id": "peugeot",
        "name": "Peugeot",
        "phonemes": "p-e-u-g-e-o-t",
        "pronunciation": "PUR-zhoh",
        "description": "French automotive manufacturer with Malaysian presence.",
        "country": "France",
        "founded": "1810",
    },
    {
        "id": "citroen",
        "name": "Citroen",
        "phonemes": "c-i-t-r-o-e-n",
        "pronunciation": "SIT-ro-en",
        "description": "French automobile manufacturer known for innovative technology.",
        "country": "France",
        "founded": "1919",
    },
    {
        "id": "renault",
        "name": "Renault",
        "phonemes": "r-e-n-a-u-l-t",
        "pronunciation": "ren-OH",
        "description": "French multinational automobile manufacturer.",
        "country": "France",
        "founded": "1899",
    },
    {
        "id": "fiat",
        "name": "Fiat",
        "phonemes": "f-i-a-t",
        "pronunciation": "FEE-aht",
        "description": "Italian automobile manufacturer, part of Stellantis.",
        "country": "Italy",
        "founded": "1899",
    },
    {
        "id": "alfa",
        "name": "Alfa Romeo",
        "phonemes": "a-l-f-a-r-o-m-e-o",
        "pronunciation": "AL-fah ro-MEH-oh",
        "description": "Italian luxury car manufacturer known for sporty vehicles.",
        "country": "Italy",
        "founded": "1910",
    },
    {
        "id": "ferrari",
        "name": "Ferrari",
        "phonemes": "f-e-r-r-a-r-i",
        "pronunciation": "fuh-RAH-ree",
        "description": "Italian luxury sports car manufacturer.",
        "country": "Italy",
        "founded": "1939",
    },
    {
        "id": "lamborghini",
        "name": "Lamborghini",
        "phonemes": "l-a-m-b-o-r-g-h-i-n-i",
        "pronunciation": "lam-bor-GEE-nee",
        "description": "Italian luxury sports car manufacturer.",
        "country": "Italy",
        "founded": "1963",
    },
    {
        "id": "maserati",
        "name": "Maserati",
        "phonemes": "m-a-s-e-r-a-t-i",
        "pronunciation": "mah-seh-RAH-tee",
        "description": "Italian luxury vehicle manufacturer.",
        "country": "Italy",
        "founded": "1914",
    },
    {
        "id": "bentley",
        "name": "Bentley",
        "phonemes": "b-e-n-t-l-e-y",
        "pronunciation": "BENT-lee",
        "description": "British luxury car manufacturer owned by Volkswagen Group.",
        "country": "UK",
        "founded": "1919",
    },
    {
        "id": "rolls",
        "name": "Rolls Royce",
        "phonemes": "r-o-l-l-s-r-o-y-c-e",
        "pronunciation": "ROLLS royce",
        "description": "British luxury automobile maker owned by BMW.",
        "country": "UK",
        "founded": "1904",
    },
    {
        "id": "jaguar",
        "name": "Jaguar",
        "phonemes": "j-a-g-u-a-r",
        "pronunciation": "JAG-you-ar",
        "description": "British luxury vehicle company owned by Tata Motors.",
        "country": "UK",
        "founded": "1935",
    },
    {
        "id": "landrover",
        "name": "Land Rover",
        "phonemes": "l-a-n-d-r-o-v-e-r",
        "pronunciation": "LAND ROH-ver",
        "description": "British brand of predominantly four-wheel drive cars.",
        "country": "UK",
        "founded": "1948",
    },
    {
        "id": "aston",
        "name": "Aston Martin",
        "phonemes": "a-s-t-o-n-m-a-r-t-i-n",
        "pronunciation": "AS-ton MAR-tin",
        "description": "British luxury sports car manufacturer.",
        "country": "UK",
        "founded": "1913",
    },
    {
        "id": "mclaren",
        "name": "McLaren",
        "phonemes": "m-c-l-a-r-e-n",
        "pronunciation": "muh-KLAR-en",
        "description": "British automotive manufacturer of luxury sports cars.",
        "country": "UK",
        "founded": "1985",
    },
    {
        "id": "lotus",
        "name": "Lotus",
        "phonemes": "l-o-t-u-s",
        "pronunciation": "LOH-tus",
        "description": "British automotive company known for sports cars.",
        "country": "UK",
        "founded": "1952",
    },

    # Luxury and supercar brands
    {
        "id": "bugatti",
        "name": "Bugatti",
        "phonemes": "b-u-g-a-t-t-i",
        "pronunciation": "boo-GAH-tee",
        "description": "French high-performance luxury automobile manufacturer.",
        "country": "France",
        "founded": "1909",
    },
    {
        "id": "koenigsegg",
        "name": "Koenigsegg",
        "phonemes": "k-o-e-n-i-g-s-e-g-g",
        "pronunciation": "KUR-nig-seg",
        "description": "Swedish manufacturer of high-performance sports cars.",
        "country": "Sweden",
        "founded": "1994",
    },
    {
        "id": "pagani",
        "name": "Pagani",
        "phonemes": "p-a-g-a-n-i",
        "pronunciation": "pah-GAH-nee",
        "description": "Italian manufacturer of sports cars and carbon fiber components.",
        "country": "Italy",
        "founded": "1992",
    },

    # Electric vehicle brands
    {
        "id": "rivian",
        "name": "Rivian",
        "phonemes": "r-i-v-i-a-n",
        "pronunciation": "RIV-ee-an",
        "description": "American electric vehicle automaker and automotive technology company.",
        "country": "USA",
        "founded": "2009",
    },
    {
        "id": "lucid",
        "name": "Lucid",
        "phonemes": "l-u-c-i-d",
        "pronunciation": "LOO-sid",
        "description": "American automotive company specializing in electric cars.",
        "country": "USA",
        "founded": "2007",
    },
    {
        "id": "nio",
        "name": "NIO",
        "phonemes": "n-i-o",
        "pronunciation": "NEE-oh",
        "description": "Chinese multinational automobile manufacturer specializing in electric vehicles.",
        "country": "China",
        "founded": "2014",
    },
    {
        "id": "xpeng",
        "name": "XPeng",
        "phonemes": "x-p-e-n-g",
        "pronunciation": "EKS-peng",
        "description": "Chinese electric vehicle manufacturer and technology company.",
        "country": "China",
        "founded": "2014",
    },
    {
        "id": "polestar",
        "name": "Polestar",
        "phonemes": "p-o-l-e-s-t-a-r",
        "pronunciation": "POLE-star",
        "description": "Swedish automotive brand, electric performance car manufacturer.",
        "country": "Sweden",
        "founded": "2017",
    },
]

LUXURY_BRANDS = (
    "mercedes", "bmw", "audi", "lexus", "ferrari", "lamborghini",
    "porsche", "bentley", "rolls", "maserati", "jaguar", "aston",
)

MAINSTREAM_BRANDS = (
    "toyota", "honda", "nissan", "ford", "chevrolet", "hyundai",
    "kia", "mazda", "volkswagen",
)
